"""Tests for locale/identifier.py and locale/options.py.

Covers serialization, field replacement with re-validation, extension
access, option application, range matching and value semantics.

Python 3.11+.
"""

import pytest

from langneg import LanguageIdentifier, parse_tag
from langneg.diagnostics import LanguageTagError
from langneg.enums import ParseErrorKind
from langneg.locale import Extension
from langneg.locale.options import (
    apply_options,
    ext_key_for_name,
    ext_name_for_key,
    option_key_for_name,
    option_name_for_key,
)


class TestSerialization:
    def test_to_string_matches_str(self) -> None:
        loc = parse_tag("EN_latn_us_u_hc_H12")
        assert loc.to_string() == str(loc) == "en-Latn-US-u-hc-h12"

    def test_subtags_order(self) -> None:
        loc = parse_tag("zh-yue-Hant-HK-1996-u-ca-chinese-x-priv")
        assert list(loc.subtags()) == [
            "zh", "yue", "Hant", "HK", "1996", "u", "ca", "chinese", "x", "priv",
        ]

    def test_absent_language_renders_und(self) -> None:
        assert str(LanguageIdentifier(region="US")) == "und-US"


class TestValueSemantics:
    def test_equality_and_hash(self) -> None:
        assert parse_tag("en-US") == LanguageIdentifier(language="en", region="US")
        assert len({parse_tag("en-US"), parse_tag("EN_us"), parse_tag("en")}) == 2

    def test_frozen(self) -> None:
        loc = parse_tag("en")
        with pytest.raises(AttributeError):
            loc.language = "fr"  # type: ignore[misc]

    def test_parse_classmethod(self) -> None:
        assert LanguageIdentifier.parse("fr-CA") == parse_tag("fr-CA")


class TestFieldReplacement:
    """with_* methods return new identifiers and re-validate input."""

    def test_with_region(self) -> None:
        loc = parse_tag("en-Latn-US")
        changed = loc.with_region("gb")
        assert str(changed) == "en-Latn-GB"
        assert str(loc) == "en-Latn-US"

    def test_with_language_and_script(self) -> None:
        loc = parse_tag("en").with_language("SR").with_script("cyrl")
        assert str(loc) == "sr-Cyrl"

    @pytest.mark.parametrize("value", ["", "und"])
    def test_with_language_clears(self, value: str) -> None:
        assert parse_tag("en-US").with_language(value).language is None

    def test_empty_clears_script_and_region(self) -> None:
        loc = parse_tag("en-Latn-US").with_script("").with_region("")
        assert loc == LanguageIdentifier(language="en")

    @pytest.mark.parametrize(
        ("method", "value", "kind"),
        [
            ("with_language", "e1", ParseErrorKind.INVALID_LANGUAGE),
            ("with_script", "Lat", ParseErrorKind.INVALID_SUBTAG),
            ("with_region", "USA", ParseErrorKind.INVALID_SUBTAG),
            ("with_variant", "abc", ParseErrorKind.INVALID_SUBTAG),
        ],
    )
    def test_invalid_values_raise(self, method: str, value: str, kind: ParseErrorKind) -> None:
        with pytest.raises(LanguageTagError) as exc_info:
            getattr(parse_tag("en"), method)(value)
        assert exc_info.value.kind == kind

    def test_variants(self) -> None:
        loc = parse_tag("ca").with_variant("VALENCIA").with_variant("1996")
        assert loc.variants == ("valencia", "1996")
        assert loc.without_variant("Valencia").variants == ("1996",)
        assert loc.without_variants().variants == ()

    def test_without_missing_variant_returns_self(self) -> None:
        loc = parse_tag("en-fonipa")
        assert loc.without_variant("1996") is loc


class TestExtensions:
    def test_with_extension_short_and_long_keys(self) -> None:
        loc = parse_tag("en").with_extension("u", "calendar", "buddhist")
        assert str(loc) == "en-u-ca-buddhist"
        loc = loc.with_extension("unicode", "CA", "gregory")
        assert str(loc) == "en-u-ca-gregory"

    def test_with_extension_appends_new_extension(self) -> None:
        loc = parse_tag("en-u-hc-h12").with_extension("t", "ab", "cd")
        assert str(loc) == "en-u-hc-h12-t-ab-cd"

    @pytest.mark.parametrize("name", ["x", "1", "ab"])
    def test_with_extension_rejects_bad_singleton(self, name: str) -> None:
        with pytest.raises(LanguageTagError) as exc_info:
            parse_tag("en").with_extension(name, "ab", "cd")
        assert exc_info.value.kind == ParseErrorKind.INVALID_SUBTAG

    def test_with_extension_rejects_bad_value(self) -> None:
        with pytest.raises(LanguageTagError):
            parse_tag("en").with_extension("u", "hc", "h")

    def test_get_extension(self) -> None:
        loc = parse_tag("en-u-hc-h12")
        ext = loc.get_extension("U")
        assert ext is not None
        assert ext == loc.get_extension("unicode")
        assert ext.singleton == "u"
        assert ext.get("hc") == "h12"
        assert ext.get("hour-cycle") == "h12"
        assert ext.get("ca") is None
        assert ext.subtags() == ["u", "hc", "h12"]
        assert loc.get_extension("t") is None

    def test_extension_default_fields(self) -> None:
        assert Extension("t").fields == ()


class TestOptionTables:
    def test_extension_names(self) -> None:
        assert ext_name_for_key("u") == "unicode"
        assert ext_key_for_name("unicode") == "u"
        assert ext_name_for_key("t") == "t"

    @pytest.mark.parametrize(
        ("key", "name"),
        [
            ("ca", "calendar"),
            ("co", "collation"),
            ("hc", "hour-cycle"),
            ("kf", "case-first"),
            ("kn", "numeric"),
            ("nu", "numbering-system"),
        ],
    )
    def test_option_names_are_bidirectional(self, key: str, name: str) -> None:
        assert option_name_for_key(key) == name
        assert option_key_for_name(name) == key

    def test_unknown_option_maps_to_itself(self) -> None:
        assert option_name_for_key("zz") == "zz"
        assert option_key_for_name("zz") == "zz"

    def test_apply_options(self) -> None:
        loc = apply_options(parse_tag("en"), {"region": "US", "numbering-system": "latn"})
        assert str(loc) == "en-US-u-nu-latn"

    def test_with_options(self) -> None:
        assert str(parse_tag("en").with_options({"hour-cycle": "h12"})) == "en-u-hc-h12"


class TestMatches:
    """Range matching over language, script, region and variants."""

    def test_exact(self) -> None:
        assert parse_tag("en-US").matches(parse_tag("en-US"), False, False)
        assert not parse_tag("en").matches(parse_tag("en-US"), False, False)

    def test_self_as_range(self) -> None:
        assert parse_tag("en").matches(parse_tag("en-US"), True, False)
        assert not parse_tag("en-US").matches(parse_tag("en"), True, False)

    def test_other_as_range(self) -> None:
        assert parse_tag("en-US").matches(parse_tag("en"), False, True)

    def test_undetermined_language_is_wildcard_in_range(self) -> None:
        assert parse_tag("und-US").matches(parse_tag("fr-US"), True, False)
        assert not parse_tag("und-US").matches(parse_tag("fr-US"), False, False)

    def test_variants_compare_as_whole(self) -> None:
        both = parse_tag("de-1996-fonipa")
        one = parse_tag("de-1996")
        assert not both.matches(one, False, False)
        assert both.matches(parse_tag("de"), False, True)

    def test_extensions_and_private_use_ignored(self) -> None:
        assert parse_tag("en-u-hc-h12-x-foo").matches(parse_tag("en"), False, False)
