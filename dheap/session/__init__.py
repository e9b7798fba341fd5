from dheap.session.loader import ArrayFileError, read_arrays
from dheap.session.session import Session
