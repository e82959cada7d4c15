from app.report.models import LabeledBlock, PlainBlock, ReportBlock


def parse_blocks(text: str) -> list[ReportBlock]:
    """Split analysis text into report blocks, one per non-blank line.

    Only a newline ends a line; a trailing carriage return is trimmed away.

    A line with a colon becomes a LabeledBlock split at the first colon;
    later colons stay in the description. Other lines become PlainBlocks.
    """
    blocks: list[ReportBlock] = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        label, sep, description = line.partition(":")
        if sep:
            blocks.append(LabeledBlock(label=label.strip(), description=description.strip()))
        else:
            blocks.append(PlainBlock(text=line.strip()))
    return blocks
