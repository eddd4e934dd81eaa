ROWS = 5
COLS = 8
POISON_ROW = ROWS
POISON_COL = COLS
FULL_ROW = 0xFF
