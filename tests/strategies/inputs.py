"""Input strategies: source text, digit runs and token sequences."""

from hypothesis import strategies as st

# Source text - keep max_size for performance
source_text = st.text(
    alphabet=st.characters(exclude_categories=["Cs"]),
    min_size=0,
    max_size=200,
)

# Positions (constrain against source length in the test)
positions = st.integers(min_value=0, max_value=300)

# Non-empty runs of ASCII digits
digit_runs = st.text(alphabet="0123456789", min_size=1, max_size=30)

# Text that does not start with an ASCII digit (may be empty)
non_digit_text = st.text(max_size=30).filter(
    lambda s: not s or s[0] not in "0123456789"
)

# Bodies of a quoted string: anything except the quote character
quoted_bodies = st.text(
    alphabet=st.characters(exclude_categories=["Cs"], exclude_characters='"'),
    max_size=50,
)

ascii_letters = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
    min_size=1,
    max_size=20,
)

# Token sequences for non-text input
token_lists = st.lists(
    st.sampled_from(["NUM", "IDENT", "LPAREN", "RPAREN", "COMMA"]),
    max_size=30,
)
