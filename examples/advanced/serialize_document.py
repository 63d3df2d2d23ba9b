"""Store parsed messages as JSON next to the raw body (round-trip check)."""

from chatmark import parse_document
from chatmark.serialization import from_json, to_json

doc = parse_document("# Cached message\n\nThis document can be *serialized* and restored.")

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
