from PySide6.QtCore import QLocale

NOT_A_NUMBER = float("nan")

def parse_number(text: str) -> float:
    """
    Parse form text to float. Anything unparseable becomes NaN.

    The default QLocale is tried first, so its decimal and group separators
    match what QDoubleValidator accepts ('1,000' is 1000 in en_US, '1,5' is
    1.5 in de_DE). Plain Python float syntax is the fallback.
    """
    if text is None:
        return NOT_A_NUMBER
    text = text.strip()

    value, ok = QLocale().toDouble(text)
    if ok:
        return value
    try:
        return float(text)
    except ValueError:
        return NOT_A_NUMBER

def format_drops(value: float) -> str:
    """Drop count with one decimal place."""
    return f"{value:.1f}"
