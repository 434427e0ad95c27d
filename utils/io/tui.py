import os

# Constants

# Backgrounds for terminals without true-color support, indexed by highlight
FALLBACK_BG = {
    1: "\033[44m",  # blue
    2: "\033[101m",  # red
    3: "\033[42m",  # green
    4: "\033[103m",  # yellow
}

RESET = "\033[0m"


def supports_true_color() -> bool:
    """
    Return True if the terminal claims to support 24-bit (true-color).
    We check COLORTERM and TERM for the usual markers.
    """
    # 1) Check COLORTERM
    ct = os.getenv("COLORTERM", "")
    if "truecolor" in ct.lower() or "24bit" in ct.lower():
        return True

    # 2) Check TERM
    term = os.getenv("TERM", "")
    if "truecolor" in term.lower() or "24bit" in term.lower():
        return True

    return False


def bg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[48;2;{red};{green};{blue}m"


def highlighted(text: str, background: str) -> str:
    """Wrap text in a background escape code, or leave it alone on an empty one."""
    if not background:
        return text
    return f"{background}{text}{RESET}"


if __name__ == "__main__":
    for code, background in FALLBACK_BG.items():
        print(highlighted(f" {code} ", background), end=" ")
    print()
    for red in range(0, 256, 85):
        print(highlighted(f" {red:3d} ", bg_color_24b(red, 128, 255 - red)), end=" ")
    print()
