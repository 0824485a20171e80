"""Unit tests for the parse error taxonomy."""

import cluster_uri
from cluster_uri import ParseErrorKind, URIParseError, errors


class TestErrorTaxonomy:
    """Every failure kind has exactly one exported exception class."""

    def test_one_class_per_kind(self):
        kinds = [cls.kind for cls in URIParseError.__subclasses__()]
        assert sorted(kinds) == sorted(ParseErrorKind)

    def test_classes_exported(self):
        for cls in URIParseError.__subclasses__():
            assert getattr(cluster_uri, cls.__name__) is cls

    def test_no_kind_lookup_table(self):
        assert "ERRORS_BY_KIND" not in errors.__all__
        assert not hasattr(errors, "ERRORS_BY_KIND")

    def test_error_details(self):
        exc = errors.InvalidPort(text="host:x", position=5)
        assert str(exc) == "port contains non-digit"
        assert exc.text == "host:x"
        assert exc.position == 5
        assert isinstance(exc, ValueError)
