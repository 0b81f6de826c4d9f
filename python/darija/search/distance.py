"""Edit distance between normalized transliterations."""


def levenshtein(a: str, b: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Single-character inserts, deletes and substitutions each cost 1.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Minimum number of edits turning a into b.
    """
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        table[i][0] = i
    for j in range(n + 1):
        table[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j],      # delete
                    table[i][j - 1],      # insert
                    table[i - 1][j - 1],  # substitute
                )
    return table[m][n]


def similarity(a: str, b: str) -> float:
    """Return 1 - distance / max length, or 0.0 when both are empty."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 0.0
    return 1 - levenshtein(a, b) / max_len
