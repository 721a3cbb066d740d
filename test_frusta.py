# -*- coding: utf-8 -*-
import logging

import pytest

from cullkit.math import Mat4
from cullkit.primitives import CascadesFrusta, CubemapFrusta, Frustum


def _frustum(far):
    return Frustum.from_clip_from_world(Mat4.perspective(90.0, 1.0, 0.1, far))


def test_cubemap_frusta_default_has_six_faces():
    cubemap = CubemapFrusta()
    assert len(cubemap) == 6
    assert len(list(cubemap)) == 6


def test_cubemap_frusta_iteration_and_replacement():
    faces = [_frustum(10.0 + i) for i in range(6)]
    cubemap = CubemapFrusta(faces)
    assert list(cubemap) == faces
    assert cubemap.frusta == tuple(faces)
    assert list(reversed(cubemap)) == faces[::-1]

    replacement = _frustum(500.0)
    cubemap[3] = replacement
    assert cubemap[3] == replacement
    assert cubemap[2] == faces[2]


def test_cubemap_frusta_rejects_wrong_face_count():
    with pytest.raises(ValueError):
        CubemapFrusta([_frustum(10.0)] * 5)


def test_cubemap_frusta_setter_keeps_six_faces():
    cubemap = CubemapFrusta()
    original = list(cubemap)
    with pytest.raises(ValueError):
        cubemap.frusta = [cubemap[0]] * 5
    assert len(cubemap) == 6
    assert list(cubemap) == original

    faces = [_frustum(20.0 + i) for i in range(6)]
    cubemap.frusta = iter(faces)
    assert len(cubemap) == 6
    assert list(cubemap) == faces
    assert cubemap.frusta == tuple(faces)


def test_cascades_frusta_mapping(caplog):
    cascades = CascadesFrusta()
    near_cascades = [_frustum(10.0), _frustum(40.0)]
    with caplog.at_level(logging.DEBUG, logger="cullkit"):
        cascades["sun"] = near_cascades
        cascades[7] = [_frustum(100.0)]
    assert "[Cascades]" in caplog.text

    assert len(cascades) == 2
    assert cascades["sun"] == near_cascades
    assert set(cascades) == {"sun", 7}
    assert len(list(cascades.frusta())) == 3

    del cascades["sun"]
    assert "sun" not in cascades
    with pytest.raises(KeyError):
        cascades["sun"]
    assert cascades.get("sun") is None
