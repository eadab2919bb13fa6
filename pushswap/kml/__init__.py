"""Character, memory, string, splitting, list, line-reading and output helpers."""