import io

from learnbits.scope import MY_VAR, PACKAGE_VAR, main, print_me


def test_print_me_to_stream():
    buffer = io.StringIO()
    print_me(5, 6, buffer)
    assert buffer.getvalue() == f"5 6 {PACKAGE_VAR}\n"


def test_print_me_defaults_to_stdout(capsys):
    print_me(-1, 0)
    assert capsys.readouterr().out == f"-1 0 {PACKAGE_VAR}\n"


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == f"{MY_VAR} 2 {PACKAGE_VAR}\n{PACKAGE_VAR}\n"


def test_main_pins_values(capsys):
    main()
    assert capsys.readouterr().out == "1 2 3\n3\n"