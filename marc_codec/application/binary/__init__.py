# marc_codec/application/binary/__init__.py

"""ISO-2709 binary framing: leader, directory, record and multi-record scanning"""

# Local imports
from marc_codec.application.binary.directory import decode_directory
from marc_codec.application.binary.directory import encode_directory
from marc_codec.application.binary.leader import decode_leader
from marc_codec.application.binary.leader import encode_leader
from marc_codec.application.binary.leader import leader_to_text
from marc_codec.application.binary.record_codec import decode_record
from marc_codec.application.binary.record_codec import encode_record
from marc_codec.application.binary.scanner import RecordScanner
from marc_codec.application.binary.scanner import scan_records

__all__ = [
    "RecordScanner",
    "decode_directory",
    "decode_leader",
    "decode_record",
    "encode_directory",
    "encode_leader",
    "encode_record",
    "leader_to_text",
    "scan_records",
]
