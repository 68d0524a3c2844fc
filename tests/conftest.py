"""Shared fixtures for qsee tests."""

import pytest

from qsee.engine.core import Input

SAMPLE_INPUT = """\
# Hydrogen molecule, RHF/cc-pVDZ
[MOLECULE]
charge = 0
mult = 1
geom:
  H 0.0 0.0 0.0

  H 0.0 0.0 0.74   # bond length in angstrom

[QM]
reference = rhf
job: scf

[BASIS]
basis = cc-pVDZ

[SCF]
maxiter = 128
conv = 1e-8
diis = on
incore = off
diis.nkeep = 8
items[0] = a
items[2] = c
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_INPUT


@pytest.fixture
def sample_input() -> Input:
    return Input.from_text(SAMPLE_INPUT)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "h2.inp"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")
    return path
