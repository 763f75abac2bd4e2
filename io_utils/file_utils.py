# io_utils/file_utils.py
"""
File naming and parameter recording helpers for exported results.
"""

import os
import datetime
from typing import Dict, Optional


def make_result_filename(
    projname: str,
    input_path: str,
    desc: str,
    ext: str = "png",
    outdir: str = ".",
    timestamp: Optional[str] = None,
) -> str:
    base = os.path.splitext(os.path.basename(input_path))[0]
    if timestamp is None:
        timestamp = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
    safe_desc = str(desc).replace(" ", "_")
    fname = f"{projname}_{base}_{safe_desc}_{timestamp}.{ext}"
    os.makedirs(outdir, exist_ok=True)
    return os.path.join(outdir, fname)


def save_parameters_txt(outdir: str, params: Dict):
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, "parameters.txt")
    with open(path, "w", encoding="utf-8") as f:
        for k, v in params.items():
            f.write(f"{k}: {v}\n")
    return path
