import logging

from rowalgebra.compute import filter_by_elem, group_table, inner_join
from rowalgebra.model import Row, Table

logging.basicConfig(level=logging.DEBUG)

orders = Table(
    [
        Row.from_pairs([("item", "book"), ("id.0", "129"), ("qty", "1")]),
        Row.from_pairs([("item", "ball"), ("id.0", "234"), ("qty", "1")]),
        Row.from_pairs([("item", "bike"), ("id.0", "410"), ("qty", "1")]),
        Row.from_pairs([("item", "book"), ("id.0", "129"), ("qty", "5")]),
    ]
)

prices = Table(
    [
        Row.from_pairs([("id.1", "129"), ("price", "100")]),
        Row.from_pairs([("id.1", "234"), ("price", "50")]),
        Row.from_pairs([("id.1", "3"), ("price", "150")]),
        Row.from_pairs([("id.1", "99"), ("price", "30")]),
    ]
)

joined = inner_join("id.0", "id.1", orders, prices)
for row in joined:
    print("---")
    print(row.insert_derived("total", lambda r: int(r["qty"]) * int(r["price"])))

for item, rows in group_table("item", joined).items():
    print("===", item, len(rows))

print(filter_by_elem(lambda qty: int(qty) > 1, "qty", orders))

# Missing keys abort the join.
print(inner_join("price", "id.1", orders, prices))
