from planetgen import H3GridIndex, generate_world
from planetgen.biomes import BIOME_COLORS, hex_to_rgb
from render import BACKGROUND, render_equirect, save_preview


def test_render_covers_whole_sphere_at_resolution_zero():
    grid = H3GridIndex()
    records = generate_world(0, seed="render", grid=grid)
    img = render_equirect(records, grid, 0, width=36, height=18)
    assert img.size == (36, 18)
    palette = {hex_to_rgb(c) for c in BIOME_COLORS.values()}
    colors = {c for _, c in img.getcolors(maxcolors=36 * 18)}
    assert colors <= palette


def test_missing_cells_keep_background(tmp_path):
    grid = H3GridIndex()
    records = generate_world(0, seed="render", grid=grid)[:1]
    out = tmp_path / "sub" / "preview.png"
    save_preview(records, grid, 0, str(out), width=24, height=12)
    assert out.exists()
    from PIL import Image

    img = Image.open(out).convert("RGB")
    assert BACKGROUND in {c for _, c in img.getcolors(maxcolors=24 * 12)}
