from cnfcyk.concepts import AbstractException
from cnfcyk.config import Exceptions

def test_str_has_type_description_and_info():
    e = Exceptions.MalformedBinaryRule(msg="got 'A,'", line_number=7)
    s = str(e)
    assert s.startswith(AbstractException.delineator)
    assert "MalformedBinaryRuleException" in s
    assert "Line 7:" in s
    assert "INFO: got 'A,'" in s

def test_long_messages_are_wrapped():
    e = Exceptions.NotChomskyNormalForm(msg="word " * 40, line_number=1)
    info_lines = str(e).split("INFO:")[1].strip("\n").split("\n")
    assert len(info_lines) > 1

def test_context_marks_offending_line():
    txt = "S:A,B\nA:a\nA:aa\nB:b\nC:c\nD:d"
    e = Exceptions.NotChomskyNormalForm(msg="'A -> aa'", line_number=3)
    s = e.to_str_with_context(txt)
    assert "   1 \t| S:A,B" in s
    assert ">> 3 \t| A:aa" in s
    assert "   5 \t| C:c" in s
    assert "6 \t| D:d" not in s

def test_equality():
    a = Exceptions.UnknownTerminal(msg="x", line_number=1)
    assert a == Exceptions.UnknownTerminal(msg="x", line_number=1)
    assert a != Exceptions.UnknownTerminal(msg="x", line_number=2)
    assert a != Exceptions.MalformedDeclaration(msg="x", line_number=1)
    assert len({a, Exceptions.UnknownTerminal(msg="x", line_number=1)}) == 1

def test_filename_is_part_of_the_location():
    e = Exceptions.UnknownTerminal(msg="'c' is not one of 'ab'", line_number=4)
    s = e.to_str_with_context("S:A,C\nA:a\nB:b\nC:c", filename="grammar.txt")
    assert "    grammar.txt, Line 4: " in s
    assert ">> 4 \t| C:c" in s
    assert "Line 4:" in str(e) and "grammar.txt" not in str(e)
