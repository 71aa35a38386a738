"""Output sinks for generated documents and records."""

from contract_gen.sinks.json_file import JsonFileSink
from contract_gen.sinks.pdf_file import PdfFileSink
from contract_gen.sinks.serialization import serialize_value, to_dict

__all__ = ["JsonFileSink", "PdfFileSink", "serialize_value", "to_dict"]
