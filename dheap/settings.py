MAX_CAPACITY = 5000         # default bound on the number of keys a heap holds
ROOT = 0                    # index of the root in the heap array
MAX_ARRAYS = 10             # arrays read from a single file
MAX_LINE_LENGTH = 30000     # characters allowed on one line of an array file
MAX_DEGREE = 2**31 - 1
DEFAULT_DEGREE = 2


class GlobalSettings:

    def __init__(self):

        # heap
        self.capacity = MAX_CAPACITY

        # array file
        self.max_arrays = MAX_ARRAYS
        self.max_line_length = MAX_LINE_LENGTH

        # logger level (0: NOTSET, 1: INFO, 2: DEBUG)
        self.verbosity = 1

    def __getitem__(self, key):
        return self.__dict__[key]

    def __setitem__(self, key, value):
        self.__dict__[key] = value

    def setup(self, args):
        if args is not None:
            self.capacity = None if args.unbounded else args.capacity
            self.max_arrays = args.max_arrays
            self.max_line_length = args.max_line_length
            self.verbosity = args.verbosity

    def __repr__(self):
        return f'{self.__class__.__name__}({self.__dict__})'


Settings = GlobalSettings()
