"""Line diff between an object's original and transformed source."""


def unified_diff(original: str, modified: str, object_name: str) -> str:
    """
    Build a simple unified-style diff.

    Two cursors walk both texts in lockstep; equal lines are context
    (``" "``), every differing pair is emitted as a removal followed by an
    addition, and the tail of the longer text is emitted as removals or
    additions. The output is advisory, not a minimal patch.

    Args:
        original: Source before remediation
        modified: Source after remediation
        object_name: Used in the ``---``/``+++`` headers

    Returns:
        Diff text joined by newlines
    """
    old_lines = original.split("\n")
    new_lines = modified.split("\n")
    output = [f"--- a/{object_name}", f"+++ b/{object_name}"]

    i = j = 0
    while i < len(old_lines) or j < len(new_lines):
        if i < len(old_lines) and j < len(new_lines):
            if old_lines[i] == new_lines[j]:
                output.append(f" {old_lines[i]}")
            else:
                output.append(f"-{old_lines[i]}")
                output.append(f"+{new_lines[j]}")
            i += 1
            j += 1
        elif i < len(old_lines):
            output.append(f"-{old_lines[i]}")
            i += 1
        else:
            output.append(f"+{new_lines[j]}")
            j += 1

    return "\n".join(output)
