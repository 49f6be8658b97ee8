"""Report specifications, row assembly and the reporting API."""
