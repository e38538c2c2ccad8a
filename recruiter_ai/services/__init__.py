"""Services package: the sanctioned way to read and write entities."""
