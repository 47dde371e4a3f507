"""Tests for parsing and statement-level error recovery."""
import pytest

from vidlang.diagnostics import DiagnosticKind
from vidlang.exceptions import EmptyTokenStreamException
from vidlang.lexer import Token, TokenType, tokenize
from vidlang.nodes import Audio, Concat, Error, Frame, If, Let, Play
from vidlang.parser import Parser, parse_program
from vidlang.tests.utils import kinds, parse_source


def test_frame_statement():
    program, errors = parse_source('frame "video.mp4" 10 to "frame10.bmp";')
    assert errors == []
    (stmt,) = program.statements
    assert isinstance(stmt, Frame)
    assert [t.value for t in stmt.source] == ["video.mp4"]
    assert [t.value for t in stmt.frame_number] == ["10"]
    assert stmt.destination == "frame10.bmp"
    assert (stmt.line, stmt.column) == (1, 1)


def test_every_statement_form():
    source = (
        'let clip = "a.mp4";\n'
        'frame clip 1 to "f.bmp";\n'
        'concat clip "b.mp4" to "c.mp4";\n'
        'audio clip "00:01" "00:02" to "a.mp3";\n'
        'play clip;\n'
        'play clip "00:01" "00:02";\n'
        'if "00:01" == "00:01" then play clip;\n'
    )
    program, errors = parse_source(source)
    assert errors == []
    assert [type(s) for s in program.statements] == [Let, Frame, Concat, Audio, Play, Play, If]
    assert not program.statements[4].ranged
    assert program.statements[5].ranged
    assert isinstance(program.statements[6].body, Play)


def test_missing_semicolon_synchronizes_to_next_statement():
    source = (
        'let start = "00:10"\n'
        'frame "video.mp4" 5 to "frame5.bmp";\n'
    )
    program, errors = parse_source(source)
    assert kinds(errors) == [DiagnosticKind.UNEXPECTED_TOKEN]
    assert errors[0].message == "Expected ';', got frame"
    assert (errors[0].line, errors[0].column) == (2, 1)
    assert [type(s) for s in program.statements] == [Error, Frame]


def test_missing_semicolon_leaves_name_unbound():
    tokens, _ = tokenize('let start = "00:10"\nplay "a.mp4";')
    parser = Parser(tokens)
    parser.parse()
    assert "start" not in parser.env


def test_double_operator_is_invalid_expression():
    source = (
        'let duration = "00:05";\n'
        'audio "video.mp4" duration + + "00:10" to "audio.mp3";\n'
        'if duration == "00:05" then play "video.mp4";\n'
    )
    program, errors = parse_source(source)
    assert kinds(errors) == [DiagnosticKind.INVALID_EXPRESSION]
    assert (errors[0].line, errors[0].column) == (2, 30)
    assert [type(s) for s in program.statements] == [Let, Error, If]


def test_unknown_command_word():
    source = (
        'let file = "video";\n'
        'invalid "video.mp4";\n'
        'concat file + ".mp4" "clip2.mp4" to "output.mp4";\n'
    )
    program, errors = parse_source(source)
    assert kinds(errors) == [DiagnosticKind.UNKNOWN_COMMAND]
    assert errors[0].message == "Unknown command: invalid"
    assert [type(s) for s in program.statements] == [Let, Error, Concat]


def test_print_is_an_unknown_command():
    program, errors = parse_source('print "x"; play "a.mp4";')
    assert kinds(errors) == [DiagnosticKind.UNKNOWN_COMMAND]
    assert errors[0].message == "Unknown command: print"
    assert [type(s) for s in program.statements] == [Error, Play]


def test_invalid_statement_start():
    program, errors = parse_source('; to "x.mp4"; play "a.mp4";')
    assert kinds(errors) == [DiagnosticKind.INVALID_STATEMENT, DiagnosticKind.INVALID_STATEMENT]
    assert errors[0].message == "Expected let, if, or command"
    assert [type(s) for s in program.statements] == [Error, Error, Play]


def test_unexpected_end_of_program():
    program, errors = parse_source('let clip = "a.mp4"')
    assert kinds(errors) == [DiagnosticKind.UNEXPECTED_TOKEN]
    assert errors[0].message == "Expected ';', got EOF"
    assert [type(s) for s in program.statements] == [Error]


def test_destination_must_be_a_string():
    program, errors = parse_source('frame "v.mp4" 1 to out; play "a.mp4";')
    assert kinds(errors) == [DiagnosticKind.UNEXPECTED_TOKEN]
    assert errors[0].message == "Expected string, got out"
    assert [type(s) for s in program.statements] == [Error, Play]


def test_parentheses_are_flattened():
    program, errors = parse_source('let t = ("00:10" + "00:05") * 2;')
    assert errors == []
    (stmt,) = program.statements
    assert [t.type for t in stmt.expr] == [
        TokenType.TIME, TokenType.PLUS, TokenType.TIME, TokenType.MUL, TokenType.NUMBER,
    ]
    assert str(stmt.value.data) == "0:30"


def test_unclosed_parenthesis():
    program, errors = parse_source('let t = ("00:10"; play "a.mp4";')
    assert kinds(errors) == [DiagnosticKind.UNEXPECTED_TOKEN]
    assert errors[0].message == "Expected ')', got ;"
    assert [type(s) for s in program.statements] == [Error, Play]


def test_let_evaluation_error_makes_statement_an_error():
    tokens, _ = tokenize('let n = 1 + 2; play "a.mp4";')
    parser = Parser(tokens)
    program = parser.parse()
    assert kinds(parser.errors) == [DiagnosticKind.TYPE_ERROR]
    assert [type(s) for s in program.statements] == [Error, Play]
    assert "n" not in parser.env


def test_let_forward_reference_is_unknown_identifier():
    program, errors = parse_source('let a = b; let b = "x";')
    assert kinds(errors) == [DiagnosticKind.UNKNOWN_IDENTIFIER]
    assert [type(s) for s in program.statements] == [Error, Let]


def test_if_with_broken_body_is_an_error():
    program, errors = parse_source('if "00:01" == "00:01" then frame "a.mp4"; play "b.mp4";')
    assert kinds(errors) == [DiagnosticKind.INVALID_EXPRESSION]
    assert [type(s) for s in program.statements] == [Error, Play]


def test_if_missing_then():
    program, errors = parse_source('if "00:01" == "00:01" play "a.mp4";')
    assert kinds(errors) == [DiagnosticKind.UNEXPECTED_TOKEN]
    assert errors[0].message == "Expected 'then', got play"
    assert [type(s) for s in program.statements] == [Error, Play]


def test_play_range_needs_two_more_expressions():
    program, errors = parse_source('play "a.mp4" "00:01"; play "b.mp4";')
    assert kinds(errors) == [DiagnosticKind.INVALID_EXPRESSION]
    assert [type(s) for s in program.statements] == [Error, Play]


def test_parse_program_returns_ast_and_diagnostics():
    tokens, _ = tokenize('play "a.mp4"; play;')
    program, errors = parse_program(tokens)
    assert len(program.statements) == 2
    assert kinds(errors) == [DiagnosticKind.INVALID_EXPRESSION]


def test_empty_token_stream_raises():
    with pytest.raises(EmptyTokenStreamException):
        Parser([])


def test_missing_eof_token_is_appended():
    tokens, _ = tokenize('play "a.mp4";')
    parser = Parser(tokens[:-1])
    program = parser.parse()
    assert parser.errors == []
    assert parser.tokens[-1] == Token(TokenType.EOF, "", 1, 14)
    assert len(program.statements) == 1
