import sys

from lazyframe import DataFrame
from lazyframe.utils.logging import configure_logging

configure_logging("DEBUG")

df = DataFrame.open_csv(sys.argv[1] if len(sys.argv) > 1 else "shops.csv") \
  .skip(1) \
  .select(lambda row: {**row, "City": str(row.get("City", "")).upper()}) \
  .bake()

print(df)
print(df.reset_index().skip(5).to_arrow())
