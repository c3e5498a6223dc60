"""Tests for TAC generation."""

import pytest

from tacc.compiler.ast_nodes import BinaryExpression, LiteralExpression, ReturnStatement
from tacc.compiler.errors import SemanticError
from tacc.compiler.ir import (
    GOTO, IF_FALSE, LABEL, MOV, RET, IRGenerator, TACInstruction, emit_text, generate_ir,
)
from tacc.compiler.lexer import Lexer
from tacc.compiler.parser import Parser


def generate(source: str) -> list[TACInstruction]:
    tokens = Lexer(source).tokenize()
    tree = Parser(tokens).parse()
    return IRGenerator().generate_code(tree)


def lines(source: str) -> list[str]:
    return [str(i) for i in generate(source)]


def ops(source: str) -> list[str]:
    return [i.op for i in generate(source)]


# --- Instruction text ---

class TestInstructionText:
    def test_binary(self):
        assert str(TACInstruction("+", "1", "2", "t0")) == "+ 1 2 t0"

    def test_absent_operands_are_empty(self):
        assert str(TACInstruction("MOV", "t0", "", "x")) == "MOV t0  x"
        assert str(TACInstruction("LABEL", "", "", "L1")) == "LABEL   L1"
        assert str(TACInstruction("GOTO", "", "", "L2")) == "GOTO   L2"
        assert str(TACInstruction("RET", "1", "", "")) == "RET 1  "
        assert str(TACInstruction("RET")) == "RET   "

    def test_emit_text_one_line_each(self):
        text = emit_text([TACInstruction("MOV", "1", "", "x"), TACInstruction("RET")])
        assert text == "MOV 1  x\nRET   \n"

    def test_emit_text_empty(self):
        assert emit_text([]) == ""


# --- Declarations and assignments ---

class TestAssignments:
    def test_declaration_with_binary(self):
        assert generate("int x = 1 + 2;") == [
            TACInstruction("+", "1", "2", "t0"),
            TACInstruction("MOV", "t0", "", "x"),
        ]

    def test_declaration_without_initializer_emits_nothing(self):
        assert generate("int x;") == []

    def test_literal_moves_directly(self):
        assert lines("float f = 2.5;") == ["MOV 2.5  f"]

    def test_assignment(self):
        assert lines("{ int x; int y; x = y; }") == ["MOV y  x"]

    def test_temps_in_postorder(self):
        assert lines("int x = 1 * 2 + 3 * 4;") == [
            "* 1 2 t0",
            "* 3 4 t1",
            "+ t0 t1 t2",
            "MOV t2  x",
        ]

    def test_operator_text_is_opcode(self):
        assert ops("{ int a; float b = a % 2 - a / 3; }") == ["%", "/", "-", "MOV"]

    def test_logical_operators_in_condition(self):
        assert ops("{ int a; if (a <= 1 && a != 2) a = 0; }")[:4] == [
            "<=", "!=", "&&", "IF_FALSE",
        ]

    def test_string_and_char_literals_keep_quotes(self):
        assert lines('std::string s = "hi";') == ['MOV "hi"  s']
        assert lines("char c = 'z';") == ["MOV 'z'  c"]


# --- Control flow ---

class TestIf:
    def test_if_else_returns(self):
        src = "{ int c; if (c) { return 1; } else { return 0; } }"
        assert lines(src) == [
            "IF_FALSE c  L1",
            "RET 1  ",
            "GOTO   L2",
            "LABEL   L1",
            "RET 0  ",
            "LABEL   L2",
        ]

    def test_if_without_else(self):
        assert lines("{ int c; if (c) c = 1; }") == [
            "IF_FALSE c  L1",
            "MOV 1  c",
            "GOTO   L2",
            "LABEL   L1",
            "LABEL   L2",
        ]

    def test_condition_lowered_first(self):
        assert lines("{ int a; if (a < 3) a = 0; }")[:2] == ["< a 3 t0", "IF_FALSE t0  L1"]

    def test_sequential_ifs_get_fresh_labels(self):
        src = "{ int c; if (c) c = 1; if (c) c = 2; }"
        labels = [i.result for i in generate(src) if i.op == "LABEL"]
        assert labels == ["L1", "L2", "L3", "L4"]

    def test_nested_if_labels(self):
        src = "{ int a; if (a) { if (a) a = 1; } else a = 2; }"
        assert lines(src) == [
            "IF_FALSE a  L1",
            "IF_FALSE a  L3",
            "MOV 1  a",
            "GOTO   L4",
            "LABEL   L3",
            "LABEL   L4",
            "GOTO   L2",
            "LABEL   L1",
            "MOV 2  a",
            "LABEL   L2",
        ]

    def test_labels_unique(self):
        src = "{ int a; if (a) { if (a) a = 1; if (a) a = 2; } else { if (a) a = 3; } }"
        labels = [i.result for i in generate(src) if i.op == "LABEL"]
        assert len(labels) == len(set(labels))


class TestReturn:
    def test_return_value(self):
        assert lines("return 1 + 2;") == ["+ 1 2 t0", "RET t0  "]

    def test_bare_return(self):
        assert lines("return;") == ["RET   "]

    def test_statements_after_return_dropped(self):
        assert lines("{ int x; return 1; x = 2; }") == ["RET 1  "]

    def test_return_inside_then_does_not_stop_if(self):
        src = "{ int c; if (c) { return 1; c = 5; } c = 7; }"
        assert lines(src) == [
            "IF_FALSE c  L1",
            "RET 1  ",
            "GOTO   L2",
            "LABEL   L1",
            "LABEL   L2",
            "MOV 7  c",
        ]


# --- Functions ---

class TestFunctions:
    def test_explicit_return_not_duplicated(self):
        assert lines("int f() { return 0; }") == ["LABEL   f", "RET 0  "]

    def test_implicit_return(self):
        assert lines("int f() { int x = 1; }") == ["LABEL   f", "MOV 1  x", "RET   "]

    def test_empty_function(self):
        assert lines("int f() { }") == ["LABEL   f", "RET   "]

    def test_body_stops_after_return(self):
        assert lines("int f() { int x; return 1; x = 3; }") == ["LABEL   f", "RET 1  "]

    def test_return_in_if_still_gets_trailing_ret(self):
        src = "int f() { int c; if (c) return 1; else return 0; }"
        result = lines(src)
        assert result[0] == "LABEL   f"
        assert result[-2:] == ["LABEL   L2", "RET   "]
        assert result.count("RET   ") == 1


# --- Generator behavior ---

class TestGenerator:
    SRC = "{ int a = 1 + 2; if (a) a = a * 2; else a = 0; }"

    def test_deterministic(self):
        assert generate(self.SRC) == generate(self.SRC)

    def test_counters_reset_per_compilation(self):
        gen = IRGenerator()
        tree = Parser(Lexer(self.SRC).tokenize()).parse()
        first = gen.generate_code(tree)
        second = gen.generate_code(tree)
        assert first == second
        assert first[0].result == "t0"

    def test_generate_ir_entry_point(self):
        tree = Parser(Lexer("int x = 4;").tokenize()).parse()
        assert generate_ir(tree) == [TACInstruction("MOV", "4", "", "x")]

    def test_unknown_operator_rejected(self):
        tree = ReturnStatement(value=BinaryExpression(
            left=LiteralExpression("1"), op="^", right=LiteralExpression("2"),
            line=4, col=2))
        with pytest.raises(SemanticError, match="Unknown binary operator") as exc:
            IRGenerator().generate_code(tree)
        assert (exc.value.line, exc.value.col) == (4, 2)

    def test_long_chain(self):
        result = lines("int x = " + " + ".join(["1"] * 600) + ";")
        assert len(result) == 600
        assert result[0] == "+ 1 1 t0"
        assert result[1] == "+ t0 1 t1"
        assert result[-2] == "+ t597 1 t598"
        assert result[-1] == "MOV t598  x"

    def test_unknown_operator_inside_chain(self):
        inner = BinaryExpression(left=LiteralExpression("1"), op="^",
                                 right=LiteralExpression("2"), line=1, col=9)
        tree = ReturnStatement(value=BinaryExpression(
            left=inner, op="+", right=LiteralExpression("3"), line=1, col=9))
        with pytest.raises(SemanticError, match="Unknown binary operator '\\^'"):
            IRGenerator().generate_code(tree)

    def test_control_opcodes(self):
        src = "int f() { int c = 1; if (c) return c; }"
        assert {i.op for i in generate(src)} == {LABEL, MOV, IF_FALSE, RET, GOTO}
