class GlobalConstants:
    # Element type modes, as written in the header of a matrix file
    INTEGER = 0
    FLOAT = 1
    # Display settings
    INT_FIELD_WIDTH = 4
    FLOAT_FIELD_WIDTH = 8
    FLOAT_PRECISION = 2
    # Sample data used when no file is loaded
    DEFAULT_SIZE = 4
    DEFAULT_TYPE = INTEGER
    DEFAULT_DATA = ("01 02 03 04 "
                    "05 06 07 08 "
                    "09 10 11 12 "
                    "13 14 15 16 "
                    "13 14 15 16 "
                    "09 10 11 12 "
                    "05 06 07 08 "
                    "01 02 03 04")
    LOGGER_NAME = "matrixtool"
