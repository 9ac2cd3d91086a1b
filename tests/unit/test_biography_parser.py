"""Tests for the biography string parser."""

import polars as pl
import pytest

from pmreport.core.errors import ParseError
from pmreport.parsers.biography_parser import (
    BiographyParser,
    DeceasedBiography,
    LivingBiography,
    PrimeMinisterRecord,
    classify,
    parse_biographies,
    parse_biography,
    read_biography,
    truncate,
)


class TestParseBiography:
    """Single-string parsing."""

    def test_deceased_prime_minister(self):
        record = parse_biography("Jawaharlal Nehru(1889–1964) MP for Phulpur", reference_year=2024)

        assert record == PrimeMinisterRecord(
            name="Jawaharlal Nehru",
            birth_year=1889,
            death_year=1964,
            alive=False,
            age=75,
        )

    def test_living_prime_minister(self):
        record = parse_biography("Narendra Modi(born 1950) MP for Varanasi", reference_year=2024)

        assert record == PrimeMinisterRecord(
            name="Narendra Modi",
            birth_year=1950,
            death_year=2024,
            alive=True,
            age=74,
        )

    def test_born_without_space_before_year(self):
        record = parse_biography("Narendra Modi(born1950) MP for Varanasi", reference_year=2024)

        assert record == PrimeMinisterRecord("Narendra Modi", 1950, 2024, True, 74)

    def test_reference_year_only_affects_living(self):
        deceased = parse_biography("Indira Gandhi(1917–1984)", reference_year=2030)
        living = parse_biography("Narendra Modi(born 1950)", reference_year=2030)

        assert deceased.death_year == 1984
        assert deceased.age == 67
        assert living.death_year == 2030
        assert living.age == 80

    @pytest.mark.parametrize("separator", ["–", "-", "—", " – "])
    def test_dash_variants(self, separator):
        record = parse_biography(f"Morarji Desai(1896{separator}1995)", reference_year=2024)

        assert (record.birth_year, record.death_year, record.age) == (1896, 1995, 99)

    def test_no_space_before_trailing_text(self):
        record = parse_biography("Gulzarilal Nanda(1898–1998)MP for Sabarkantha", 2024)

        assert record.name == "Gulzarilal Nanda"
        assert record.age == 100

    def test_space_between_name_and_parenthesis_is_stripped(self):
        record = parse_biography("Charan Singh (1902–1987) MP for Baghpat", 2024)

        assert record.name == "Charan Singh"

    def test_footnote_markers_are_removed(self):
        record = parse_biography("Gulzarilal Nanda[a](1898–1998)[12] MP for Sabarkantha", 2024)

        assert record.name == "Gulzarilal Nanda"
        assert record.birth_year == 1898

    def test_trailing_text_never_leaks(self):
        record = parse_biography(
            "Atal Bihari Vajpayee(1924–2018) MP for Lucknow (1991–2009) born 1800", 2024
        )

        assert record.name == "Atal Bihari Vajpayee"
        assert (record.birth_year, record.death_year) == (1924, 2018)
        assert record.alive is False

    def test_name_containing_born_is_not_living(self):
        record = parse_biography("Osborne Smith(1900–1980)", 2024)

        assert record.alive is False
        assert record.name == "Osborne Smith"

    def test_parse_is_idempotent(self):
        raw = "Lal Bahadur Shastri(1904–1966) MP for Allahabad"

        assert parse_biography(raw, 2024) == parse_biography(raw, 2024)


class TestParseErrors:
    """Malformed strings raise ParseError naming the string."""

    @pytest.mark.parametrize(
        "raw",
        [
            "Jawaharlal Nehru 1889–1964",
            "Jawaharlal Nehru(unknown) MP for Phulpur",
            "Jawaharlal Nehru(1889) MP for Phulpur",
            "Narendra Modi(born) MP for Varanasi",
            "Narendra Modi(born unknown)",
            "(1889–1964) MP for Phulpur",
            "Jawaharlal Nehru(89–64)",
        ],
    )
    def test_malformed_strings(self, raw):
        with pytest.raises(ParseError) as exc_info:
            parse_biography(raw, reference_year=2024)

        assert exc_info.value.raw == raw
        assert repr(raw) in str(exc_info.value)

    def test_death_before_birth(self):
        with pytest.raises(ParseError, match="not before death year"):
            parse_biography("Someone(1964–1889)", reference_year=2024)

    def test_reference_year_before_birth(self):
        with pytest.raises(ParseError, match="not before reference year"):
            parse_biography("Narendra Modi(born 1950)", reference_year=1949)

    def test_year_digits_only_inside_trailing_text(self):
        with pytest.raises(ParseError):
            parse_biography("Someone(born) elected 1999", reference_year=2024)


class TestHelpers:
    def test_truncate_drops_everything_from_first_closing_parenthesis(self):
        assert truncate("Name(1900–1950) MP for X (2000)") == "Name(1900–1950"

    def test_truncate_without_closing_parenthesis_keeps_string(self):
        assert truncate("Name(1900–1950") == "Name(1900–1950"

    def test_truncate_requires_opening_parenthesis(self):
        with pytest.raises(ParseError):
            truncate("Name 1900–1950")

    def test_classify(self):
        assert classify("Narendra Modi(born 1950) MP") is LivingBiography
        assert classify("Jawaharlal Nehru(1889–1964) MP") is DeceasedBiography

    def test_read_biography_returns_variant(self):
        assert read_biography("Narendra Modi(born 1950)") == LivingBiography("Narendra Modi", 1950)
        assert read_biography("Indira Gandhi(1917–1984)") == DeceasedBiography(
            "Indira Gandhi", 1917, 1984
        )

    @pytest.mark.parametrize(
        "raw",
        [
            "Narendra Modi(born 1950) MP",
            "Narendra Modi(born1950) MP",
            "Jawaharlal Nehru(1889–1964) MP",
            "Osborne Smith(1900–1980)",
        ],
    )
    def test_read_biography_agrees_with_classify(self, raw):
        assert type(read_biography(raw)) is classify(raw)

    def test_born_without_space_is_living(self):
        assert classify("Narendra Modi(born1950)") is LivingBiography


class TestParseBiographies:
    """Batch parsing."""

    RAWS = [
        "Narendra Modi(born 1950) MP for Varanasi",
        "Jawaharlal Nehru(1889–1964) MP for Phulpur",
        "Indira Gandhi(1917–1984) MP for Rae Bareli",
        "Jawaharlal Nehru(1889–1964) MP for Phulpur",
    ]

    def test_duplicates_collapsed_and_sorted_by_birth_year(self):
        records = parse_biographies(self.RAWS, reference_year=2024)

        assert [record.name for record in records] == [
            "Jawaharlal Nehru",
            "Indira Gandhi",
            "Narendra Modi",
        ]

    def test_each_string_classified_once(self):
        records = parse_biographies(self.RAWS, reference_year=2024)

        assert sum(record.alive for record in records) == 1
        assert sum(not record.alive for record in records) == 2

    def test_all_or_nothing(self):
        raws = self.RAWS + ["Broken entry without years"]

        with pytest.raises(ParseError) as exc_info:
            parse_biographies(raws, reference_year=2024)

        assert exc_info.value.raw == "Broken entry without years"

    def test_identical_output_on_repeat(self):
        first = parse_biographies(self.RAWS, reference_year=2024)
        second = parse_biographies(list(reversed(self.RAWS)), reference_year=2024)

        assert first == second

    def test_empty_input(self):
        assert parse_biographies([], reference_year=2024) == []


class TestBiographyParser:
    def test_parse_uses_reference_year(self):
        records = BiographyParser(reference_year=2020).parse(["Narendra Modi(born 1950)"])

        assert records[0].age == 70

    def test_to_frame_schema(self):
        parser = BiographyParser(reference_year=2024)
        frame = parser.to_frame(parser.parse(TestParseBiographies.RAWS))

        assert frame.columns == ["name", "birth_year", "death_year", "alive", "age"]
        assert frame.schema["alive"] == pl.Boolean
        assert frame.get_column("age").to_list() == [75, 67, 74]

    def test_to_frame_empty(self):
        frame = BiographyParser.to_frame([])

        assert frame.is_empty()
        assert frame.columns == ["name", "birth_year", "death_year", "alive", "age"]
