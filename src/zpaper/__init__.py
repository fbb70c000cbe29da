"""zpaper - print binary data on paper and read it back."""

__version__ = "0.1.0"
__author__ = "zpaper Team"
__description__ = "Paper-transcribable z-base-32 codec with cumulative CRC-20 line checksums"
