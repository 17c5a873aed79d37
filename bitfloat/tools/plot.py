"""Plot the distribution of every value of a small float format."""

import sys
import math

import matplotlib.pyplot as plt

from ..bits.ops import VK
from ..arithmetic import ieee754, formatctx

# image size in pixels
width = 1500
height = 150
dpi = 100

# (color, marker area in points**2, filled) for each kind of point
styles = {
    'denormal': ('red', 4, True),
    'normal': ('blue', 16, True),
    'zero': ('green', 36, True),
    'infinity': ('magenta', 100, False),
}


def collect_points(ctx=formatctx.small):
    """Group the x, y positions of every non-NaN pattern by how they are drawn.
    Normal and denormal numbers and the infinities sit on y=0,
    negative zero at y=-1 and positive zero at y=1.
    """
    points = {k: ([], []) for k in styles}

    for f in ieee754.iter_all(ctx):
        val = f.evaluate()
        if val.is_nan():
            continue

        if val.kind == VK.NEGATIVE_ZERO:
            key, x, y = 'zero', 0.0, -1
        elif val.kind == VK.POSITIVE_ZERO:
            key, x, y = 'zero', 0.0, 1
        elif val.is_inf():
            key, x, y = 'infinity', float(f.raw_value()), 0
        elif val.is_denormalized():
            key, x, y = 'denormal', float(val.magnitude), 0
        else:
            key, x, y = 'normal', float(val.magnitude), 0

        xs, ys = points[key]
        xs.append(x)
        ys.append(y)

    return points


def x_limit(points):
    """Half width of the x axis: a little past the largest value drawn.
    For the small format, the infinities are drawn at +-16 and the axis spans +-17.
    """
    finite = [abs(x) for xs, ys in points.values() for x in xs if math.isfinite(x)]
    if finite:
        return max(1.0, max(finite)) * 17 / 16
    else:
        return 1.0


def plot(path, ctx=formatctx.small):
    """Render the distribution to an image file; the type comes from the extension."""
    ctx = formatctx.lookup_format(ctx)
    points = collect_points(ctx)
    limit = x_limit(points)

    # infinities past the float32 range are pinned to the edges
    xs, ys = points['infinity']
    points['infinity'] = ([x if math.isfinite(x) else math.copysign(limit, x) for x in xs], ys)

    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    try:
        ax = fig.gca()
        for key, (color, area, filled) in styles.items():
            xs, ys = points[key]
            if not xs:
                continue
            if filled:
                ax.scatter(xs, ys, s=area, c=color, marker='o')
            else:
                ax.scatter(xs, ys, s=area, facecolors='none', edgecolors=color, marker='o')

        ax.set_xlim(-limit, limit)
        ax.set_ylim(-2, 2)
        ax.get_yaxis().set_visible(False)
        ax.tick_params(axis='x', labelsize=10)
        fig.tight_layout()
        fig.savefig(path, dpi=dpi, facecolor='white')
    finally:
        plt.close(fig)

    print('wrote {} ({} values)'.format(str(path), sum(len(xs) for xs, ys in points.values())),
          file=sys.stderr, flush=True)
