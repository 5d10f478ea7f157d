"""Tests for :mod:`identcase.kebab`: the identifier normalizer.

Covers :class:`TestDocumentedScenarios`, :class:`TestSegmentationRules`,
:class:`TestOutputInvariants`, :class:`TestInputClassification`, and
:class:`TestIndividualPasses`.
"""

from __future__ import annotations

import pytest

from identcase.errors import ActionableError, ErrorType
from identcase.kebab import (
    collapse_separators,
    split_acronyms,
    split_case_transitions,
    strip_punctuation,
    to_kebab_case,
)

# Mixed-notation inputs used by the invariant checks
_SAMPLE_INPUTS = [
    "",
    "fooBarBAZ",
    "foo__bar  baz--qux",
    "__foo-bar! ",
    "getHTTPResponse",
    "foo2Bar 3baz",
    "  --My__Test123--Case!! ",
    "XMLHttpRequest",
    "already-kebab-case",
    "SCREAMING_SNAKE_CASE",
    "PascalCaseName",
    "tab\tand\nnewline",
    "!!!",
    "12345",
    "a-_- -b",
    "ÉtéCafé",
    "ABC1Def",
]


class TestDocumentedScenarios:
    """
    REQUIREMENT: The documented input/output pairs hold exactly.

    WHO: Callers turning identifiers into URL slugs, CSS classes or CLI flags
    WHAT: Mixed casing, repeated separators, edge symbols, acronyms and
          embedded digits each normalize to the documented kebab-case string
    WHY: These pairs are the published contract of the normalizer; any drift
         silently renames every identifier downstream
    """

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("fooBarBAZ", "foo-bar-baz"),
            ("foo__bar  baz--qux", "foo-bar-baz-qux"),
            ("__foo-bar! ", "foo-bar"),
            ("getHTTPResponse", "get-http-response"),
            ("foo2Bar 3baz", "foo2-bar-3baz"),
            ("  --My__Test123--Case!! ", "my-test123-case"),
        ],
    )
    def test_documented_pair(self, text: str, expected: str) -> None:
        """
        When a documented example input is normalized
        Then the result equals the documented output
        """
        result = to_kebab_case(text)

        assert result == expected, f"Expected {expected!r} for {text!r}, got {result!r}"


class TestSegmentationRules:
    """
    REQUIREMENT: Words are split at separators, case transitions and
    acronym tails, and nowhere else.

    WHO: Any caller passing camelCase, PascalCase, snake_case or phrases
    WHAT: Separator runs collapse to one boundary; lower/digit→upper starts a
          new word; an acronym gives its last letter to a following capitalised
          word; digits stay attached to neighbouring lowercase letters;
          punctuation is deleted without creating a boundary
    WHY: Each rule is an edge-case policy; a regression in one of them changes
         output for whole families of identifiers
    """

    def test_digits_do_not_split_from_lowercase_letters(self) -> None:
        """
        When a digit sits between lowercase letters
        Then the identifier stays a single word
        """
        result = to_kebab_case("foo2bar")

        assert result == "foo2bar", f"Expected digits kept inside the word, got {result!r}"

    def test_leading_digit_stays_with_following_lowercase(self) -> None:
        """
        When a word starts with a digit followed by lowercase letters
        Then it stays one word
        """
        result = to_kebab_case("3baz")

        assert result == "3baz", f"Expected '3baz', got {result!r}"

    def test_digit_before_uppercase_starts_new_word(self) -> None:
        """
        When a digit is followed by an uppercase letter
        Then a boundary is inserted between them
        """
        result = to_kebab_case("version2Beta")

        assert result == "version2-beta", f"Expected split after the digit, got {result!r}"

    def test_pascal_case_splits_on_each_capital(self) -> None:
        """
        When a PascalCase identifier is normalized
        Then each capitalised word becomes its own token
        """
        result = to_kebab_case("PascalCaseName")

        assert result == "pascal-case-name", f"Expected PascalCase split, got {result!r}"

    def test_leading_acronym_splits_before_capitalised_word(self) -> None:
        """
        When an acronym run is followed by a capitalised word
        Then the last capital of the run starts the next word
        """
        result = to_kebab_case("XMLHttpRequest")

        assert result == "xml-http-request", f"Expected acronym split, got {result!r}"

    def test_trailing_acronym_stays_whole(self) -> None:
        """
        When an acronym run ends the input
        Then it is not split
        """
        result = to_kebab_case("parseURL")

        assert result == "parse-url", f"Expected trailing acronym kept whole, got {result!r}"

    def test_acronym_followed_by_capital_and_digit_splits(self) -> None:
        """
        When an uppercase run is followed by a capital and then a digit
        Then the last capital attaches to the digit
        """
        result = to_kebab_case("ABC1")

        assert result == "ab-c1", f"Expected split before the last capital, got {result!r}"

    def test_acronym_before_punctuation_stays_whole(self) -> None:
        """
        When an uppercase run is followed by punctuation
        Then the run is not split and the punctuation is removed
        """
        result = to_kebab_case("ID!")

        assert result == "id", f"Expected 'id', got {result!r}"

    def test_screaming_snake_case_is_lowercased_per_word(self) -> None:
        """
        When an all-caps snake_case identifier is normalized
        Then underscores become hyphens and each word is lowercased
        """
        result = to_kebab_case("SCREAMING_SNAKE_CASE")

        assert result == "screaming-snake-case", f"Expected snake→kebab, got {result!r}"

    def test_punctuation_between_words_fuses_them(self) -> None:
        """
        When two words are separated only by punctuation
        Then the punctuation is deleted and the words fuse into one
        """
        result = to_kebab_case("foo!bar")

        assert result == "foobar", f"Expected punctuation to fuse words, got {result!r}"

    def test_punctuation_does_not_act_as_lowercase_for_case_split(self) -> None:
        """
        When punctuation precedes an uppercase letter
        Then no case boundary is inserted there
        """
        result = to_kebab_case("foo.Bar")

        assert result == "foobar", f"Expected no boundary at punctuation, got {result!r}"

    def test_tabs_and_newlines_are_separators(self) -> None:
        """
        When words are separated by tabs or newlines
        Then each whitespace run acts as one boundary
        """
        result = to_kebab_case("tab\tand\n\nnewline")

        assert result == "tab-and-newline", f"Expected whitespace as separator, got {result!r}"

    def test_non_ascii_letters_are_removed(self) -> None:
        """
        When the input contains non-ASCII letters
        Then they are treated as punctuation and deleted
        """
        result = to_kebab_case("café au lait")

        assert result == "caf-au-lait", f"Expected non-ASCII letters dropped, got {result!r}"


class TestOutputInvariants:
    """
    REQUIREMENT: Every output is canonical kebab-case.

    WHO: Callers that embed the output in URLs, filenames or CSS selectors
    WHAT: No uppercase, underscore, whitespace, leading/trailing hyphen or
          doubled hyphen; normalizing twice equals normalizing once;
          letterless input degrades to an empty string without raising
    WHY: Downstream code relies on the output being stable and safe without
         re-validating it
    """

    @pytest.mark.parametrize("text", _SAMPLE_INPUTS)
    def test_output_is_canonical(self, text: str) -> None:
        """
        When any sample input is normalized
        Then the result has only lowercase ASCII letters, digits and single inner hyphens
        """
        result = to_kebab_case(text)

        assert result == result.lower(), f"Uppercase left in {result!r}"
        assert "_" not in result, f"Underscore left in {result!r}"
        assert not any(ch.isspace() for ch in result), f"Whitespace left in {result!r}"
        assert not result.startswith("-") and not result.endswith("-"), (
            f"Edge hyphen in {result!r}"
        )
        assert "--" not in result, f"Doubled hyphen in {result!r}"

    @pytest.mark.parametrize("text", _SAMPLE_INPUTS)
    def test_normalization_is_idempotent(self, text: str) -> None:
        """
        When an already-normalized string is normalized again
        Then it is unchanged
        """
        once = to_kebab_case(text)

        twice = to_kebab_case(once)

        assert twice == once, f"Expected idempotence for {text!r}: {once!r} → {twice!r}"

    @pytest.mark.parametrize("text", ["", "!!!", "   ", "__--__", "€$%"])
    def test_letterless_input_yields_empty_string(self, text: str) -> None:
        """
        When the input has no ASCII letters or digits
        Then the result is an empty string and nothing is raised
        """
        result = to_kebab_case(text)

        assert result == "", f"Expected empty output for {text!r}, got {result!r}"

    def test_purely_numeric_input_is_kept(self) -> None:
        """
        When the input is a string of digits
        Then it is returned unchanged as a single word
        """
        result = to_kebab_case("12345")

        assert result == "12345", f"Expected digits kept, got {result!r}"


class TestInputClassification:
    """
    REQUIREMENT: Only text is accepted.

    WHO: Callers that might pass None, numbers or bytes by mistake
    WHAT: Any non-str value raises a TYPE_KIND ActionableError naming the
          received type; str subclasses are accepted
    WHY: Silently stringifying 42 or None would produce plausible-looking but
         wrong identifiers
    """

    @pytest.mark.parametrize("value", [42, None, 3.5, b"fooBar", ["foo"], True])
    def test_non_text_raises_type_kind(self, value: object) -> None:
        """
        When a non-str value is normalized
        Then an ActionableError of type TYPE_KIND is raised
        """
        with pytest.raises(ActionableError) as exc_info:
            to_kebab_case(value)

        assert exc_info.value.error_type == ErrorType.TYPE_KIND
        assert "input must be text" in exc_info.value.error

    def test_type_kind_error_names_received_type(self) -> None:
        """
        When an int is passed
        Then the error context records the received type name
        """
        with pytest.raises(ActionableError) as exc_info:
            to_kebab_case(42)

        assert exc_info.value.context == {"argument_type": "int"}

    def test_str_subclass_is_accepted(self) -> None:
        """
        When a str subclass is passed
        Then it is normalized like a plain string
        """

        class Name(str):
            pass

        result = to_kebab_case(Name("fooBar"))

        assert result == "foo-bar", f"Expected str subclass accepted, got {result!r}"


class TestIndividualPasses:
    """
    REQUIREMENT: Each segmentation pass does one job.

    WHO: Maintainers changing a single rule
    WHAT: The separator, case-transition, acronym and punctuation passes each
          transform only what they own
    WHY: Keeping the passes independent makes the order of rules explicit and
         lets a change to one rule be checked in isolation
    """

    def test_collapse_separators_replaces_runs_with_one_space(self) -> None:
        """
        When runs of underscores, hyphens and spaces are collapsed
        Then each run becomes a single space and edge runs are kept as one space
        """
        result = collapse_separators("__foo-_-bar  ")

        assert result == " foo bar ", f"Expected single-space boundaries, got {result!r}"

    def test_split_case_transitions_leaves_acronyms_whole(self) -> None:
        """
        When case transitions are split
        Then consecutive capitals are not separated from each other
        """
        result = split_case_transitions("getHTTPResponse")

        assert result == "get HTTPResponse", f"Expected one boundary, got {result!r}"

    def test_split_acronyms_detaches_last_capital(self) -> None:
        """
        When acronym tails are split
        Then the run keeps all but its last capital
        """
        result = split_acronyms("get HTTPResponse")

        assert result == "get HTTP Response", f"Expected acronym split, got {result!r}"

    def test_strip_punctuation_keeps_boundaries(self) -> None:
        """
        When punctuation is stripped
        Then letters, digits and spaces survive
        """
        result = strip_punctuation(" foo bar! Case!! ")

        assert result == " foo bar Case ", f"Expected punctuation removed, got {result!r}"
