# Admissible publication years for year-bearing advisory identifiers (inclusive)
YEAR_MIN = 2000
YEAR_MAX = YEAR_MIN + 100
