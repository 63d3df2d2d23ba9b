"""Parse a chat message and tokenize its text blocks."""

from chatmark import parse, tokenize_block

message = "## Viewing\nSaturday at **11:00**, bring your `student ID`.\n\n- no pets\n- *quiet* hours"

for block in parse(message):
    print(block.key, type(block).__name__, tokenize_block(block))
