from copy import deepcopy

from ListMatrix import in_bounds, swap_list_rows, swap_list_columns, update_list_element, format_list_matrix
from MatrixErrors import DimensionMismatch, ShapeError
from LoggingConfig import get_logger

logger = get_logger("SquareMatrix")


class SquareMat:
    # Matrix of values, with equal width and height
    # element_type (int or float) decides the zero value and how the matrix is displayed
    def __init__(self, size=0, element_type=int):
        if size < 0:
            raise ShapeError("Matrix size cannot be negative.")
        self.__element_type = element_type
        # Matrix is initialised populated with the zero value of the element type
        self.__matrix_data = [[element_type() for _ in range(size)] for _ in range(size)]
        logger.debug("Created %dx%d %s matrix", size, size, element_type.__name__)

    @classmethod
    def empty(cls, element_type=int):
        return cls(0, element_type)

    @classmethod
    def identity(cls, size, element_type=int):
        matrix = cls(size, element_type)
        for index in range(size):
            matrix.__matrix_data[index][index] = element_type(1)
        return matrix

    @property
    def size(self):
        # Size is always derived from the stored rows so it can never disagree with the data
        return len(self.__matrix_data)

    @property
    def element_type(self):
        return self.__element_type

    @property
    def rows(self):
        # Copy so callers cannot break the square invariant from outside
        return deepcopy(self.__matrix_data)

    def get_item(self, row, col):
        self.__check_index(row, col)
        return self.__matrix_data[row][col]

    def set_item(self, row, col, value):
        self.__check_index(row, col)
        self.__matrix_data[row][col] = self.__element_type(value)

    def __check_index(self, row, col):
        if not in_bounds(self.size, row, col):
            raise IndexError("Index (%s, %s) out of range for %dx%d matrix." % (row, col, self.size, self.size))

    def set_all(self, rows):
        # Replaces every element; size becomes the number of rows given
        new_data = [[self.__element_type(value) for value in row] for row in rows]
        for row in new_data:
            if len(row) != len(new_data):
                raise ShapeError("Every row must contain %d values." % len(new_data))
        self.__matrix_data = new_data

    def fill_row_major(self, values):
        # Populates the existing grid from size * size values, row 0 left to right, then row 1 and so on
        values = [self.__element_type(value) for value in values]
        if len(values) != self.size ** 2:
            raise ShapeError("Expected %d values but got %d." % (self.size ** 2, len(values)))
        for row_num in range(self.size):
            self.__matrix_data[row_num] = values[row_num * self.size: (row_num + 1) * self.size]

    def add(self, other):
        if self.size != other.size:
            raise DimensionMismatch("Matrix dimensions do not match for addition")
        result = SquareMat(self.size, self.__element_type)
        # Sizes have been checked once, so the grids are indexed directly
        for i in range(self.size):
            for j in range(self.size):
                result.__matrix_data[i][j] = self.__matrix_data[i][j] + other.__matrix_data[i][j]
        return result

    def multiply(self, other):
        if self.size != other.size:
            raise DimensionMismatch("Matrix dimensions do not match for multiplication")
        result = SquareMat(self.size, self.__element_type)
        for i in range(self.size):
            for j in range(self.size):
                total = self.__element_type()
                for k in range(self.size):
                    total += self.__matrix_data[i][k] * other.__matrix_data[k][j]
                result.__matrix_data[i][j] = total
        logger.debug("Multiplied two %dx%d matrices", self.size, self.size)
        return result

    def sum_diagonals(self):
        # The two diagonals are summed independently, so the centre of an odd sized matrix counts towards both
        main_sum = self.__element_type()
        anti_sum = self.__element_type()
        for i in range(self.size):
            main_sum += self.__matrix_data[i][i]
            anti_sum += self.__matrix_data[i][self.size - 1 - i]
        return main_sum, anti_sum

    def swap_rows(self, row1, row2):
        return swap_list_rows(self.__matrix_data, row1, row2)

    def swap_columns(self, col1, col2):
        return swap_list_columns(self.__matrix_data, col1, col2)

    def update_element(self, row, col, value):
        # Written values are converted to the element type, so an int matrix truncates floats
        return update_list_element(self.__matrix_data, row, col, self.__element_type(value))

    def format(self):
        return format_list_matrix(self.__matrix_data, self.__element_type)

    def __str__(self):
        return self.format()

    def __eq__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.__matrix_data == other.__matrix_data

    def __repr__(self):
        return "SquareMat(%r)" % self.__matrix_data
