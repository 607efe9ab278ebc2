import logging
import exactgauss as eg
from exactgauss.names import *

logging.basicConfig(level=logging.INFO)

print("*** RANDOM ELIMINATION TEST ***")
matrix = eg.random_matrix()
print("\n" + eg.describe(matrix, BEFORE_ELIMINATION))
print(matrix.to_table_string())

pivoted = list(matrix.iter_eliminate())
logging.info(f"Pivoted columns: {pivoted}")

print("\n" + eg.describe(matrix, AFTER_ELIMINATION))
print(matrix.to_table_string())
print(matrix.to_numpy())
