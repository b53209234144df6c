from .datastructures import BinomialHeap, EmptyHeapError, HeapInterface

__version__ = "0.1.0"

__all__ = ["BinomialHeap", "EmptyHeapError", "HeapInterface", "__version__"]
