from typing import Protocol


class ImageConverterPort(Protocol):
    def convert(self, source: str, dest: str) -> str:
        """
        Convert the image at source into dest.

        Returns the path actually written. Raises ConversionError on failure.
        """
        ...
