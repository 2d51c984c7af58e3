"""Election Watch: address-to-ballot resolution over the Google Civic Information API."""

__version__ = "0.1.0"
