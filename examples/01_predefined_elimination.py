import logging
import exactgauss as eg
from exactgauss.names import *

logging.basicConfig(level=logging.INFO)

print("*** PREDEFINED ELIMINATION TEST ***")
for matrix in eg.predefined_matrices():
    print("\n\n\n" + eg.describe(matrix, BEFORE_ELIMINATION))
    print(matrix.to_table_string())

    def show_column(col, matrix=matrix):
        print("\n" + eg.describe(matrix, AFTER_COLUMN + " " + str(col + 1)))
        print(matrix.to_table_string())

    matrix.add_column_observer(show_column)
    matrix.eliminate()

    print("\n" + eg.describe(matrix, AFTER_ELIMINATION))
    print(matrix.to_table_string())
