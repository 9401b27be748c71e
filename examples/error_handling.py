"""Error handling patterns with recovery hints.

Every error is terminal for the whole call: the first failing date aborts
the search and no partial result is returned.
"""

from smapcatalog import (
    DateNotAvailableError,
    SmapCatalogError,
    UnknownDatasetError,
    find_smap,
)


# Pattern 1: Suggest valid dataset ids
def find_with_suggestions(dataset_id: str, day: str, version: int) -> None:
    """Print available ids when the requested one doesn't exist."""
    try:
        print(find_smap(dataset_id, day, version))
    except UnknownDatasetError as e:
        print(f"Dataset '{e.dataset_id}' not found.")
        print(f"Hint: {e.recovery_hint}")


# Pattern 2: Skip days that haven't been published
def find_published(dataset_id: str, days: list[str], version: int) -> list[str]:
    """Search day by day, skipping dates without a folder."""
    found: list[str] = []
    for day in days:
        try:
            found.extend(find_smap(dataset_id, day, version)["name"])
        except DateNotAvailableError as e:
            print(f"Skipping {e.date}: {e}")
    return found


# Pattern 3: Catch-all with hints
def find_or_explain(dataset_id: str, day: str, version: int) -> None:
    """Handle any library error in one place."""
    try:
        print(find_smap(dataset_id, day, version))
    except SmapCatalogError as e:
        print(f"Error: {e}")
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}")


if __name__ == "__main__":
    find_with_suggestions("SPL9XXX", "2015-03-31", version=2)
    find_published("SPL4SMGP", ["2015-03-31", "2014-01-01"], version=2)
    find_or_explain("SPL4SMGP", "2015-03-31", version=9)
