# xllmath — spreadsheet add-in math functions
# Public API

# Data model
from .core import PutSpec, DomainError, PARAMS

# Scalar functions
from .black_scholes import normal_cdf, bsm_put, bsm_put_strict, price, is_domain_error
from .special import tgamma

# Vectorised
from .black_scholes_vec import normal_cdf_vec, bsm_put_vec
from .special import tgamma_vec

# Batch sheet pricing
from .book import read_rows, price_row, price_book, write_results

__all__ = [
    "PutSpec", "DomainError", "PARAMS",
    "normal_cdf", "bsm_put", "bsm_put_strict", "price", "is_domain_error",
    "tgamma",
    "normal_cdf_vec", "bsm_put_vec", "tgamma_vec",
    "read_rows", "price_row", "price_book", "write_results",
]

__version__ = "0.1.0"
