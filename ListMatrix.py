from Constants import GlobalConstants


# Helpers working directly on a square matrix stored as a list of row lists
# The size of the matrix is always taken to be the number of rows


def in_bounds(size, *indices):
    # Negative indices are treated as out of range rather than wrapping around
    for index in indices:
        if index < 0 or index >= size:
            return False
    return True


def swap_list_rows(matrix, row1, row2):
    if not in_bounds(len(matrix), row1, row2):
        return False
    matrix[row1], matrix[row2] = matrix[row2], matrix[row1]
    return True


def swap_list_columns(matrix, col1, col2):
    if not in_bounds(len(matrix), col1, col2):
        return False
    for row in matrix:
        row[col1], row[col2] = row[col2], row[col1]
    return True


def update_list_element(matrix, row, col, value):
    if not in_bounds(len(matrix), row, col):
        return False
    matrix[row][col] = value
    return True


def element_format(element_type, padded=True):
    # Integers are printed plainly, floats with a fixed number of decimal places in a wider field
    # Unpadded formats are used for single values printed inline
    if element_type is int:
        width = str(GlobalConstants.INT_FIELD_WIDTH) if padded else ""
        return "%" + width + "d"
    else:
        width = str(GlobalConstants.FLOAT_FIELD_WIDTH) if padded else ""
        return "%" + width + "." + str(GlobalConstants.FLOAT_PRECISION) + "f"


def format_list_matrix(matrix, element_type=int):
    field = element_format(element_type)
    text = ""
    for row in matrix:
        text += "".join(field % value for value in row) + "\n"
    return text
