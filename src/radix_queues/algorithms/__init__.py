from .radix_sort import NUM_CHARS, NUM_DIGITS, PAD_CHAR, alphabetical_radix_sort, int_radix_sort

__all__ = ["NUM_CHARS", "NUM_DIGITS", "PAD_CHAR", "alphabetical_radix_sort", "int_radix_sort"]
