import os, toml


def load_defaults():
    defaults_file = os.path.join(os.path.dirname(__file__), "../config/defaults.toml")
    with open(defaults_file, "r") as f:
        data = toml.load(f)
    return data
