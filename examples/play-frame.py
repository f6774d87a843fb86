import pyarrow as pa

from rowalgebra.frame import Frame

data = pa.table(
    {
        "animals": pa.array(["Flamingo", "Horse", "Brittle stars", "Centipede"]),
        "n_legs": pa.array([2, 4, 5, 100]),
    }
)

frame = Frame.from_arrow(data).filter_by_key(lambda n_legs: n_legs >= 5, "n_legs")
print(frame)
print(frame.to_arrow())

table = frame.to_table()
print(table.scan_left(lambda total, row: total + row["n_legs"], 0))
