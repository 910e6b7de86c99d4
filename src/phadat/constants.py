
import sys

# appended to the input path to name the text output
POSTFIX = ".new.txt"

# written after every counter value, in binary mode
TERMINATORS = {
    "crlf": b"\r\n",
    "lf": b"\n",
}
TERMINATOR = TERMINATORS["crlf"]

# FILENAME_MAX of the C runtime
PATH_MAX = 260 if sys.platform == "win32" else 4096

# number of counters decoded per read of the channel array
CHUNK_CHANNELS = 4096
