import io

import pytest

from easylocal.componenttester import (
    ComponentTester,
    EmptyNeighborhood,
    read_choice,
    read_token,
)


class Recorder(ComponentTester):
    def __init__(self, name):
        super().__init__(name)
        self.choice = None

    def run_main_menu(self, state):
        self.show_menu()
        self.execute_choice(state)

    def show_menu(self):
        self.choice = 1

    def execute_choice(self, state):
        state.append(self.choice)
        return True

    def modality(self):
        return 1


def test_read_choice_integer():
    assert read_choice(io.StringIO("12\n")) == 12


def test_read_choice_invalid_word():
    assert read_choice(io.StringIO("abc\n")) == -1


def test_read_choice_leading_digits_and_sign():
    assert read_choice(io.StringIO("5x")) == 5
    assert read_choice(io.StringIO("-3")) == -3


def test_read_choice_successive_words():
    stream = io.StringIO("  7   8\n")
    assert read_choice(stream) == 7
    assert read_choice(stream) == 8


def test_read_token_end_of_input():
    with pytest.raises(EOFError):
        read_token(io.StringIO("   \n"))
    with pytest.raises(EOFError):
        read_choice(io.StringIO(""))


def test_read_token_word():
    assert read_token(io.StringIO("\tfile.txt rest")) == "file.txt"


def test_component_tester_is_abstract():
    with pytest.raises(TypeError):
        ComponentTester("x")


def test_concrete_component_tester():
    tester = Recorder("rec")
    assert tester.name == "rec"
    state = []
    tester.run_main_menu(state)
    choice = read_choice(io.StringIO("4\n"))
    assert choice == 4
    tester.choice = choice
    tester.execute_choice(state)
    assert state == [1, 4]


def test_empty_neighborhood_carries_message():
    error = EmptyNeighborhood("none")
    assert str(error) == "none"
    assert error.args == ("none",)
    try:
        raise error
    except Exception as caught:
        assert caught is error