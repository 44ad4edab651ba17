"""tcknctl — Turkish national identity number (TCKN) generator and validator."""

__version__ = "0.1.0"
