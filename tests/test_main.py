import json

from pixmill import generate_pattern
from pixmill.main import main
from pixmill.utils import load_image, save_image


def test_generate_and_save(tmp_path):
    out = tmp_path / "board.png"
    assert main(["--generate", "checkerboard", "2", "2", "-o", str(out), "-q"]) == 0
    assert load_image(out) == generate_pattern("checkerboard", 2, 2)


def test_filters_chain_and_scale(tmp_path):
    src = tmp_path / "in.png"
    out = tmp_path / "out.png"
    save_image(generate_pattern("french_flag", 4, 6), src)
    code = main(["-i", str(src), "-o", str(out), "--filter", "blur", "--filter", "dither", "--scale", "2", "-q"])
    assert code == 0
    result = load_image(out)
    assert result.shape == (8, 12)
    assert set(result.array.ravel().tolist()) <= {0, 255}


def test_mosaic_uses_config_defaults(tmp_path):
    config = tmp_path / "c.json"
    config.write_text(json.dumps({"mosaic_seeds": 1, "random_seed": 3}), encoding="utf-8")
    out = tmp_path / "m.png"
    code = main(["--generate", "swiss_flag", "32", "32", "--mosaic", "-o", str(out), "--config", str(config), "-q"])
    assert code == 0
    colours = {tuple(px) for row in load_image(out).array.tolist() for px in row}
    assert len(colours) == 1


def test_argument_errors(tmp_path):
    out = str(tmp_path / "x.png")
    assert main(["-i", str(tmp_path / "missing.png"), "-o", out, "-q"]) == 2
    assert main(["--generate", "stars", "1", "1", "-o", out, "-q"]) == 2
    assert main(["--generate", "checkerboard", "1", "1", "--scale", "0", "-o", out, "-q"]) == 2
    assert main(["--generate", "checkerboard", "1", "1", "-q"]) == 2


def test_processing_error(tmp_path):
    out = str(tmp_path / "x.png")
    assert main(["--generate", "swiss_flag", "30", "30", "-o", out, "-q"]) == 1


def test_script(tmp_path):
    out = tmp_path / "s.png"
    script = tmp_path / "s.txt"
    script.write_text(f"generate vertical_rainbow 3 7\napply sepia\nundo\nsave '{out}'\n", encoding="utf-8")
    assert main(["--script", str(script), "-q"]) == 0
    assert load_image(out) == generate_pattern("vertical_rainbow", 3, 7)


def test_explicit_negative_mosaic_is_rejected(tmp_path):
    out = str(tmp_path / "x.png")
    assert main(["--generate", "checkerboard", "1", "1", "--mosaic", "-1", "-o", out, "-q"]) == 2


def test_mistyped_config_values_are_argument_errors(tmp_path):
    out = str(tmp_path / "x.png")
    for values in ({"mosaic_seeds": "5"}, {"output_scale": 1.5}):
        config = tmp_path / "c.json"
        config.write_text(json.dumps(values), encoding="utf-8")
        args = ["--generate", "checkerboard", "1", "1", "--mosaic", "-o", out, "--config", str(config), "-q"]
        assert main(args) == 2


def test_unwritable_log_file(tmp_path):
    out = str(tmp_path / "x.png")
    log_file = str(tmp_path / "no" / "such" / "dir" / "run.log")
    assert main(["--generate", "checkerboard", "1", "1", "-o", out, "--log-file", log_file, "-q"]) == 2
