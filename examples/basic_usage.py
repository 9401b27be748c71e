"""Basic find example.

This example shows the simplest usage pattern: ask which files a dataset
has on a couple of dates. Nothing is downloaded; the result is a pandas
DataFrame with one row per logical file.
"""

from smapcatalog import find_smap


# SMAP L4 Global 3-hourly 9 km Surface and Rootzone Soil Moisture, version 2
files = find_smap(id="SPL4SMGP", dates=["2015-03-31", "2015-04-01"], version=2)
print(files)

# Date ranges work too (anything iterable of dates)
# import pandas as pd
# files = find_smap("SPL4SMGP", pd.date_range("2015-03-31", "2015-04-02"), version=2)
