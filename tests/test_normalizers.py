import pytest

from voiceform.normalizers import get_default_normalizer, RuleNormalizer, NormalizerPipeline

N = get_default_normalizer()

def norm(text, kind, lang="en"):
    return N.normalize_answer(text, kind, lang)


# --- email ---

@pytest.mark.parametrize("text,expected", [
    ("my email is John.Doe@Example.com please", "john.doe@example.com"),
    ("it's a.b+tag@mail.co.uk, thanks", "a.b+tag@mail.co.uk"),
    ("first x@y.io then z@w.org", "x@y.io"),
])
def test_email_pulls_first_address(text, expected):
    assert norm(text, "email") == expected

def test_email_spoken_without_at_gets_default_domain():
    assert norm("email johnsmith", "email") == "emailjohnsmith@gmail.com"

def test_email_custom_default_domain():
    rn = RuleNormalizer(email_domain="example.org")
    assert rn.normalize_answer("e-mail bob", "email") == "e-mailbob@example.org"

def test_email_without_keyword_is_left_lowercased():
    assert norm("  Call Me Maybe ", "email") == "call me maybe"

@pytest.mark.parametrize("text", ["Reach me at Ann@Corp.COM", "email johnsmith", "nothing here"])
def test_email_idempotent(text):
    once = norm(text, "email")
    assert norm(once, "email") == once


# --- phone ---

@pytest.mark.parametrize("text,expected", [
    ("my number is 555-123-4567", "5551234567"),
    ("+1 (555) 123-4567", "+15551234567"),
    ("call 555.123.4567 after six", "5551234567"),
])
def test_phone_pattern(text, expected):
    assert norm(text, "tel") == expected

def test_phone_spelled_out_ten_digits():
    assert norm("5 5 5 1 2 3 4 5 6 7", "tel") == "5551234567"

def test_phone_long_digit_run_gets_plus():
    assert norm("9 1 9 8 7 6 5 4 3 2 1 0", "tel") == "+919876543210"
    assert norm("1 2 3 4 5 6 7 8 9 0 1", "tel") == "+12345678901"

def test_phone_too_few_digits_left_alone():
    assert norm(" 12345 ", "tel") == "12345"
    assert norm("I don't have one", "tel") == "i don't have one"

def test_phone_alias():
    assert norm("my number is 555-123-4567", "phone") == "5551234567"

@pytest.mark.parametrize("text", [
    "my number is 555-123-4567", "+1 (555) 123-4567",
    "9 1 9 8 7 6 5 4 3 2 1 0", "5 5 5 1 2 3 4 5 6 7", "no digits",
])
def test_phone_idempotent(text):
    once = norm(text, "tel")
    assert norm(once, "tel") == once


# --- date ---

@pytest.mark.parametrize("text,expected", [
    ("I was born on 15/08/1990 in Delhi", "15/08/1990"),
    ("1990-08-15", "1990-08-15"),
    ("around 1-2-85 I think", "1-2-85"),
])
def test_date_numeric_token_verbatim(text, expected):
    assert norm(text, "date") == expected

def test_date_month_name_left_as_spoken():
    assert norm("January 15 1990", "date") == "january 15 1990"

def test_date_unrecognized():
    assert norm(" Sometime Last Year ", "date") == "sometime last year"


# --- text and everything else ---

def test_text_only_first_char_capitalized():
    assert norm("John Smith", "text") == "John smith"
    assert norm("  hello WORLD ", "text") == "Hello world"

@pytest.mark.parametrize("kind", [None, "", "signature", "something-new"])
def test_unknown_types_behave_like_text(kind):
    assert norm("Signed By ME", kind) == "Signed by me"

@pytest.mark.parametrize("kind", ["text", "email", "tel", "date"])
def test_empty_input_never_fails(kind):
    assert norm("   ", kind) == ""
    assert norm("", kind) == ""


# --- pipeline ---

class Upper:
    def normalize_answer(self, text, field_type, language="en"):
        return text.upper()

def test_pipeline_chains_stages():
    p = NormalizerPipeline([RuleNormalizer(), Upper()])
    assert p.normalize_answer("John Smith", "text") == "JOHN SMITH"


# --- non-ASCII numerals ---

@pytest.mark.parametrize("text", ["मेरा नंबर ९८७६५४३२१० है", "আমার নম্বর ৯৮৭৬৫৪৩২১০", "నా నంబర్ ౯౮౭౬౫౪౩౨౧౦"])
def test_phone_native_digits_kept_as_spoken(text):
    assert norm(text, "tel") == text

def test_date_native_digits_kept_as_spoken():
    assert norm("१५/०८/१९९०", "date") == "१५/०८/१९९०"

def test_phone_ascii_digits_inside_native_text():
    assert norm("मेरा नंबर 555-123-4567 है", "tel") == "5551234567"
