import pytest
from scripts.solve import main

LVL = "0706111100102100100111154001100301100111111100"


def test_solved_prints_elapsed(capsys):
    assert main([LVL]) is True
    out = capsys.readouterr().out.strip()
    assert out.startswith(LVL + "::")
    assert out.endswith("s")
    assert "notsolved" not in out


def test_not_solved(capsys):
    walled = "0407" + "1111111" + "1321321" + "1401001" + "1111111"
    assert main([walled]) is False
    assert capsys.readouterr().out.strip() == walled + "::notsolved"


def test_ascii_level(tmp_path, capsys):
    path = tmp_path / "level.txt"
    path.write_text("######\n#**# #\n#  # #\n#@   #\n######\n", encoding="utf-8")
    assert main(["--ascii", str(path)]) is True
    assert capsys.readouterr().out.startswith("0506111111155101100101140001111111::")


def test_malformed_level_exits():
    with pytest.raises(SystemExit) as e:
        main(["0506123"])
    assert e.value.code == 2


def test_non_ascii_digit_header_exits():
    with pytest.raises(SystemExit) as e:
        main(["²506111111122101133101140001111111"])
    assert e.value.code == 2
