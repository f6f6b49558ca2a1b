"""
Load functions defined in an external Python script.

Running a script file and picking up the functions it defines lets a
learner keep helpers in their own file and reuse them from a session.
Only functions whose __module__ matches the script's namespace are
returned, so names the script merely imports are left out.
"""
import inspect
import os
import runpy
from typing import Callable, Dict

SCRIPT_MODULE_NAME = "__fnlessons_script__"


def load_functions(script_path: str) -> Dict[str, Callable]:
    """Execute script_path and return its public functions by name.

    Names starting with an underscore are skipped. Each call executes the
    script again in a fresh namespace.

    Raises:
        FileNotFoundError: If the script does not exist
    """
    if not os.path.isfile(script_path):
        raise FileNotFoundError(f"Script not found: {script_path}")

    namespace = runpy.run_path(script_path, run_name=SCRIPT_MODULE_NAME)

    return {
        name: obj
        for name, obj in namespace.items()
        if not name.startswith("_")
        and inspect.isfunction(obj)
        and obj.__module__ == SCRIPT_MODULE_NAME
    }


__all__ = ["load_functions"]
