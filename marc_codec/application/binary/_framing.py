# marc_codec/application/binary/_framing.py

"""ISO-2709 structural constants"""

LEADER_LENGTH = 24
DIRECTORY_ENTRY_LENGTH = 12
LENGTH_PREFIX = 5

FIELD_TERMINATOR = 0x1E
RECORD_TERMINATOR = 0x1D
SUBFIELD_DELIMITER = 0x1F

# Five digit record length and base address, four digit field length
MAX_RECORD_LENGTH = 99999
MAX_FIELD_LENGTH = 9999
MAX_FIELD_START = 99999

# Smallest structurally possible record: leader, directory terminator, record terminator
MIN_RECORD_LENGTH = LEADER_LENGTH + 1
