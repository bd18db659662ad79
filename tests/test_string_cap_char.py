from fhetoolkit.string_cap_char import State, capitalize, my_package


def _run(text):
    st = State()
    return "".join(st.process(c) for c in text)


def test_capitalizes_short_phrase():
    assert _run("do or do not") == "Do Or Do Not"


def test_capitalizes_long_phrase():
    assert _run("do or do not; there is no try!.!") == "Do Or Do Not; There Is No Try!.!"


def test_processes_special_chars():
    assert _run("d,o o.r^ d&*::o no!t;") == "D,o O.r^ D&*::o No!t;"


def test_capitalize_helper():
    assert capitalize("do or do not") == "Do Or Do Not"


def test_state_starts_after_space():
    assert State().last_was_space is True


def test_state_tracks_space():
    st = State()
    assert my_package(st, "d") == "D"
    assert st.last_was_space is False
    assert my_package(st, " ") == " "
    assert st.last_was_space is True
    assert my_package(st, "o") == "O"