from qfx2qif.tags import MAX_FIELD_BYTES, extract_tag, find_marker


def test_closed_tag_returns_content_between_markers():
    assert extract_tag(b"<STMTTRN><NAME>ACME CORP</NAME></STMTTRN>", "NAME") == b"ACME CORP"


def test_unterminated_tag_stops_at_next_tag():
    assert extract_tag(b"<NAME>Alice<MEMO>lunch</MEMO>", "NAME") == b"Alice"


def test_unterminated_tag_runs_to_end_of_buffer():
    assert extract_tag(b"<TRNAMT>-12.50\r\n", "TRNAMT") == b"-12.50\r\n"


def test_missing_tag_returns_none():
    assert extract_tag(b"<NAME>Alice</NAME>", "MEMO") is None


def test_empty_value_is_not_none():
    assert extract_tag(b"<NAME></NAME>", "NAME") == b""
    assert extract_tag(b"<NAME><MEMO>x", "NAME") == b""


def test_lookup_ignores_ascii_case():
    assert extract_tag(b"<name>bob</NAME>", "NAME") == b"bob"
    assert extract_tag(b"<Name>bob</nAmE>", "name") == b"bob"


def test_first_closer_wins_without_nesting():
    assert extract_tag(b"<NAME>a<NAME>b</NAME></NAME>", "NAME") == b"a<NAME>b"


def test_closer_found_past_other_tags():
    # A closer anywhere after the opener wins over the next '<'.
    assert extract_tag(b"<NAME>a<MEMO>m</MEMO>b</NAME>", "NAME") == b"a<MEMO>m</MEMO>b"


def test_prefix_of_another_tag_does_not_match():
    assert extract_tag(b"<NAMEX>nope</NAMEX>", "NAME") is None


def test_value_is_truncated_silently():
    long_value = b"x" * (MAX_FIELD_BYTES + 500)
    out = extract_tag(b"<MEMO>" + long_value + b"</MEMO>", "MEMO")
    assert out == b"x" * MAX_FIELD_BYTES


def test_value_at_limit_is_kept_whole():
    value = b"y" * MAX_FIELD_BYTES
    assert extract_tag(b"<MEMO>" + value, "MEMO") == value


def test_bytes_tag_name_is_accepted():
    assert extract_tag(b"<TRNAMT>1.00</TRNAMT>", b"trnamt") == b"1.00"


def test_find_marker_offsets():
    buf = b"abc<StmtTrn>def"
    assert find_marker(buf, b"<STMTTRN") == 3
    assert find_marker(buf, b"<STMTTRN", 4) == -1
    assert find_marker(buf, b"</STMTTRN>") == -1


def test_regex_metacharacters_in_tag_are_literal():
    assert extract_tag(b"<A.B>v</A.B>", "A.B") == b"v"
    assert extract_tag(b"<AxB>v</AxB>", "A.B") is None
