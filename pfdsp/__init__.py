"""Mixed-radix FFTs, cosine/sine transforms and a CIC down-converter in pure Python."""

__version__ = "0.1.0"
__all__ = ["cic", "factors", "cfft", "rfft_forward", "rfft_backward", "transforms"]