"""C-style helpers for characters, numbers, strings and output."""