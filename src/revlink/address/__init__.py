"""Link address codec."""

from revlink.address.codec import DELIMITER, abbreviate_revision, decode, encode

__all__ = ["DELIMITER", "abbreviate_revision", "decode", "encode"]
