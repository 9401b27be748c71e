"""Searching a local mirror of the catalog.

Point the catalog root at a directory laid out like the remote server
(<root>/<ID>.<VVV>/<YYYY.MM.DD>/<files>) and the same validation and
discovery run without network access.
"""

from pathlib import Path

from smapcatalog import FilesystemTransport, Finder, FinderConfig


mirror = Path("./mirror/SMAP")

finder = Finder(
    FilesystemTransport(),
    config=FinderConfig(catalog_root=str(mirror)),
)
table = finder.find("SPL4SMGP", "2015-03-31", version=2)

for row in table:
    print(row.date, mirror / row.ftp_dir / f"{row.date:%Y.%m.%d}" / row.name)

# The environment works too:
#   SMAPCATALOG_ROOT=file://$PWD/mirror/SMAP smapcatalog find SPL4SMGP 2015-03-31 -v 2
