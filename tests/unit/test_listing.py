"""Tests for directory-listing parsing."""

import pytest
from conftest import listing, ls_file, ls_line

from smapcatalog.core.exceptions import EmptyDirectoryError, ListingParseError
from smapcatalog.core.listing import (
    discover_names,
    entry_rows,
    file_names,
    folder_names,
    is_empty_sentinel,
    logical_names,
    strip_extension,
)


ROUTE = "ftp://catalog.test/SAN/SMAP/SPL4SMGP.002/2015.03.31/"


@pytest.mark.core
@pytest.mark.tra("Domain.Listing")
@pytest.mark.tier(0)
class TestEntryRows:
    """Tests for entry_rows()."""

    def test_skips_total_line(self) -> None:
        """The 'total N' summary line is not an entry."""
        rows = entry_rows(listing(ls_line("a"), ls_line("b")))
        assert [row[-1] for row in rows] == ["a", "b"]

    def test_keeps_first_row_without_summary(self) -> None:
        """Listings without a summary line keep every row."""
        rows = entry_rows([ls_line("a"), ls_line("b")])
        assert len(rows) == 2

    def test_ignores_blank_lines(self) -> None:
        """Blank and whitespace-only lines are dropped."""
        rows = entry_rows(["total 4", "", ls_line("a"), "   ", ""])
        assert len(rows) == 1


@pytest.mark.core
@pytest.mark.tra("Domain.Listing")
@pytest.mark.tier(0)
class TestFolderNames:
    """Tests for the fixed 9th-column strategy."""

    def test_returns_ninth_column_in_order(self) -> None:
        """Folder names come from column 9, in listing order."""
        lines = listing(ls_line("SPL4SMGP.002"), ls_line("SPL3SMP.004"))
        assert folder_names(lines, ROUTE) == ["SPL4SMGP.002", "SPL3SMP.004"]

    def test_extra_columns_do_not_move_name(self) -> None:
        """Columns past the 9th are ignored; the 9th is always the name."""
        lines = listing(ls_line("2015.03.31") + " -> elsewhere")
        assert folder_names(lines, ROUTE) == ["2015.03.31"]

    def test_short_row_raises_parse_error(self) -> None:
        """A row with fewer than nine columns is malformed."""
        lines = listing(ls_line("ok"), "drwxr-xr-x 2 ftp ftp 4096 2015.03.31")

        with pytest.raises(ListingParseError) as exc_info:
            folder_names(lines, ROUTE)

        assert exc_info.value.route == ROUTE
        assert exc_info.value.line == "drwxr-xr-x 2 ftp ftp 4096 2015.03.31"

    def test_summary_only_yields_nothing(self) -> None:
        """A listing with only its summary has no folder names."""
        assert folder_names(["total 0"], ROUTE) == []


@pytest.mark.core
@pytest.mark.tra("Domain.Listing")
@pytest.mark.tier(0)
class TestFileNames:
    """Tests for the dynamic name-column strategy."""

    def test_finds_column_by_prefix(self) -> None:
        """The name column is the one starting with the prefix."""
        lines = listing(ls_file("SMAP_a.h5"), ls_file("SMAP_b.h5"))
        assert file_names(lines, ROUTE, "SMAP") == ["SMAP_a.h5", "SMAP_b.h5"]

    def test_column_position_follows_content(self) -> None:
        """Listings with fewer columns still find the name."""
        lines = ["total 2", "-rw-r--r-- 1 4096 Mar 31 SMAP_a.h5"]
        assert file_names(lines, ROUTE, "SMAP") == ["SMAP_a.h5"]

    def test_column_is_fixed_from_first_row(self) -> None:
        """Later rows use the first row's column even if names differ."""
        lines = listing(ls_file("SMAP_a.h5"), ls_file("README.txt"))
        assert file_names(lines, ROUTE, "SMAP") == ["SMAP_a.h5", "README.txt"]

    def test_no_matching_column_raises(self) -> None:
        """If no first-row column has the prefix, the listing can't be read."""
        lines = listing(ls_file("README.txt"))

        with pytest.raises(ListingParseError) as exc_info:
            file_names(lines, ROUTE, "SMAP")

        assert "SMAP" in str(exc_info.value)

    def test_short_later_row_raises(self) -> None:
        """A later row without the name column is malformed."""
        lines = listing(ls_file("SMAP_a.h5"), "-rw-r--r-- 1 ftp")

        with pytest.raises(ListingParseError):
            file_names(lines, ROUTE, "SMAP")

    def test_summary_only_yields_nothing(self) -> None:
        """A non-empty listing with no entry rows gives no names."""
        assert file_names(["total 8"], ROUTE, "SMAP") == []


@pytest.mark.core
@pytest.mark.tra("Domain.Listing")
@pytest.mark.tier(0)
class TestLogicalNames:
    """Tests for extension stripping and deduplication."""

    def test_strip_extension_cuts_at_first_dot(self) -> None:
        """Everything from the first dot is dropped."""
        assert strip_extension("SMAP_a.h5.iso.xml") == "SMAP_a"
        assert strip_extension("SMAP_a") == "SMAP_a"

    def test_duplicates_collapse_in_first_seen_order(self) -> None:
        """Files of one product collapse, order is first-seen."""
        names = ["SMAP_b.h5", "SMAP_a.h5", "SMAP_b.h5.iso.xml", "SMAP_a.qa"]
        assert logical_names(names) == ["SMAP_b", "SMAP_a"]

    def test_hidden_files_are_skipped(self) -> None:
        """Dot-files have no stem and contribute no name."""
        lines = listing(ls_file("SMAP_a.h5"), ls_file(".SMAP_a.h5.lock"))

        assert discover_names(lines, ROUTE, "SMAP") == ["SMAP_a"]
        assert logical_names([".listing", "SMAP_b.h5"]) == ["SMAP_b"]

    def test_known_name_set_is_recovered(self) -> None:
        """Parsing a listing built from known products recovers them."""
        products = ["SMAP_L4_1", "SMAP_L4_2", "SMAP_L4_3"]
        lines = listing(
            *(ls_file(f"{p}{ext}") for p in products for ext in (".h5", ".xml"))
        )

        assert discover_names(lines, ROUTE, "SMAP") == products

    def test_property_names_are_unique_and_extensionless(self) -> None:
        """Any listing of SMAP files yields unique, dot-free names in order."""
        from hypothesis import given
        from hypothesis.strategies import from_regex, lists, sampled_from

        product = from_regex(r"SMAP_[A-Z0-9_]{1,12}", fullmatch=True)
        extension = sampled_from(["", ".h5", ".h5.iso.xml", ".qa"])

        @given(files=lists(product.flatmap(lambda p: extension.map(p.__add__))))
        def _test_logical_names(files: list[str]) -> None:
            lines = listing(*(ls_file(name) for name in files))

            names = discover_names(lines, ROUTE, "SMAP")

            assert len(names) == len(set(names))
            assert all("." not in name for name in names)
            expected = []
            for name in files:
                stem = name.split(".")[0]
                if stem not in expected:
                    expected.append(stem)
            assert names == expected

        _test_logical_names()


@pytest.mark.core
@pytest.mark.tra("Domain.Listing")
@pytest.mark.tier(0)
class TestEmptySentinel:
    """Tests for the 'total 0' empty-directory sentinel."""

    def test_total_zero_alone_is_sentinel(self) -> None:
        """Exactly 'total 0' is the empty-directory sentinel."""
        assert is_empty_sentinel(["total 0"])
        assert is_empty_sentinel(["total 0", ""])

    def test_other_summaries_are_not_sentinel(self) -> None:
        """A different total, or rows after it, is not the sentinel."""
        assert not is_empty_sentinel(["total 8"])
        assert not is_empty_sentinel(["total 0", ls_file("SMAP_a.h5")])
        assert not is_empty_sentinel([])

    def test_discover_raises_empty_directory(self) -> None:
        """Discovering in a 'total 0' folder raises EmptyDirectoryError."""
        with pytest.raises(EmptyDirectoryError) as exc_info:
            discover_names(["total 0"], ROUTE, "SMAP")

        assert exc_info.value.route == ROUTE
        assert ROUTE in str(exc_info.value)

    def test_summary_without_files_is_empty_result(self) -> None:
        """Other content with no file rows is an empty result, not an error."""
        assert discover_names(["total 4"], ROUTE, "SMAP") == []
