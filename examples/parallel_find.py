"""Searching many dates in parallel.

Each date is validated and listed independently, so dates can run on a
thread pool. Rows still come back in the order the dates were given.
"""

import pandas as pd

from smapcatalog import Finder, FinderConfig


config = FinderConfig(max_workers=4, timeout=30)
finder = Finder.from_config(config)

dates = pd.date_range("2015-04-01", "2015-04-14")
files = finder.find_frame("SPL4SMGP", dates, version=2)
print(files.groupby("date").size())

# Check the dataset and version once instead of once per date
# (a deliberate deviation: the catalog is assumed not to change mid-call)
quick = Finder.from_config(
    FinderConfig(max_workers=4, timeout=30, revalidate_per_date=False)
)
files = quick.find_frame("SPL4SMGP", dates, version=2)
