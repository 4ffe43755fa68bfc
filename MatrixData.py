from numpy import array

from SquareMatrix import SquareMat
from MatrixErrors import IngestionError
from Constants import GlobalConstants
from LoggingConfig import get_logger

logger = get_logger("MatrixData")

ELEMENT_TYPES = {GlobalConstants.INTEGER: int, GlobalConstants.FLOAT: float}


def split_tokens(text):
    return text.split()


def element_type_for(code):
    try:
        return ELEMENT_TYPES[int(code)]
    except (KeyError, ValueError):
        raise IngestionError("Invalid matrix type. Type must be 0 (int) or 1 (double).") from None


def parse_values(tokens, element_type=int):
    # NumPy does the string conversion; tolist() hands back plain Python numbers
    try:
        return array(list(tokens), dtype=str).astype(element_type).tolist()
    except (ValueError, OverflowError) as error:
        raise IngestionError("Malformed matrix value: %s" % error) from error


def load_matrices(size, tokens, element_type=int):
    # Two matrices of equal size are read back to back from one token sequence
    if size < 0:
        raise IngestionError("Matrix size cannot be negative.")
    tokens = list(tokens)
    per_matrix = size ** 2
    if len(tokens) != 2 * per_matrix:
        raise IngestionError("Expected %d values for two %dx%d matrices but got %d."
                             % (2 * per_matrix, size, size, len(tokens)))
    values = parse_values(tokens, element_type)
    matrix1 = SquareMat(size, element_type)
    matrix2 = SquareMat(size, element_type)
    matrix1.fill_row_major(values[:per_matrix])
    matrix2.fill_row_major(values[per_matrix:])
    logger.info("Loaded two %dx%d %s matrices", size, size, element_type.__name__)
    return matrix1, matrix2


def read_matrix_file(path):
    # First two tokens are the matrix size and element type code, the rest are the values
    try:
        with open(path, encoding="utf-8") as file_obj:
            tokens = split_tokens(file_obj.read())
    except OSError as error:
        raise IngestionError("Could not open file %s" % path) from error
    except UnicodeDecodeError as error:
        raise IngestionError("File %s is not a text matrix file." % path) from error
    if len(tokens) < 2:
        raise IngestionError("File %s is missing the size and type header." % path)
    try:
        size = int(tokens[0])
    except ValueError:
        raise IngestionError("Invalid matrix size %r in %s." % (tokens[0], path)) from None
    element_type = element_type_for(tokens[1])
    logger.info("Read %d values from %s", len(tokens) - 2, path)
    return size, element_type, tokens[2:]


def load_matrix_file(path):
    size, element_type, tokens = read_matrix_file(path)
    return load_matrices(size, tokens, element_type)


def default_matrices():
    return load_matrices(GlobalConstants.DEFAULT_SIZE, split_tokens(GlobalConstants.DEFAULT_DATA),
                         ELEMENT_TYPES[GlobalConstants.DEFAULT_TYPE])
