"""Comment block keys used for packet tagging."""

TIMESTAMP_KEY = "c"
SOURCE_ID_KEY = "si"
SOURCE_BS_KEY = "sb"
SOURCE_COUNTRY_KEY = "sc"
SOURCE_TYPE_KEY = "st"
