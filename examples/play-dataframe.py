import logging
import os

import rowframe

logging.basicConfig(level=logging.DEBUG)

filename = os.path.join(os.path.dirname(__file__), "data", "shops.csv")
rows, row_count, col_count = rowframe.load_csv(filename, ignore_rows=[0])
print(f"Loaded {row_count - 1} rows and {col_count} columns")

rowframe.coerce_column(rows, 2)
for city in ("New York", "Rome", "Los Angeles"):
    employees = rowframe.flatten(rowframe.create_slice(rows, 0, city, [2]))
    print(
        city,
        rowframe.total(employees),
        rowframe.mean(employees),
        rowframe.median(employees),
    )
