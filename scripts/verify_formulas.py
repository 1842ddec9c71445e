"""Derive the join/meet formulas from blade wedge products and check the kernel against them."""
import itertools

import torch

from pga_kernel.pga import Point, Line, Plane, join, meet

# Storage order of each entity mapped to the blade it multiplies.
# e.g. e31 is stored as (3, 1) meaning e3^e1
point_blades = [(1,), (2,), (3,), (4,)]
line_blades = [(4, 1), (4, 2), (4, 3), (2, 3), (3, 1), (1, 2)]
plane_blades = [(2, 3, 4), (3, 1, 4), (1, 2, 4), (3, 2, 1)]

ALL_INDICES = (1, 2, 3, 4)


def canonical_blade(blade):
    """Convert blade to canonical form (sorted, with sign)."""
    blade = list(blade)
    sign = 1
    for i in range(len(blade)):
        for j in range(len(blade) - 1 - i):
            if blade[j] > blade[j + 1]:
                blade[j], blade[j + 1] = blade[j + 1], blade[j]
                sign *= -1
    return tuple(blade), sign


def wedge_blades(a, b):
    """Wedge two blades, returning (canonical_blade, sign); sign 0 if they share an index."""
    if set(a) & set(b):
        return (), 0
    return canonical_blade(tuple(a) + tuple(b))


def right_complement(blade):
    """Blade c with blade ^ c == e1234, as (canonical_blade, sign)."""
    rest = tuple(i for i in ALL_INDICES if i not in blade)
    _, sign = canonical_blade(tuple(blade) + rest)
    return rest, sign


def left_complement(blade):
    """Blade c with c ^ blade == e1234, as (canonical_blade, sign)."""
    rest = tuple(i for i in ALL_INDICES if i not in blade)
    _, sign = canonical_blade(rest + tuple(blade))
    return rest, sign


def to_canonical(coords, blades):
    """Map storage components to {canonical_blade: value}."""
    terms = {}
    for k, blade in enumerate(blades):
        canonical, sign = canonical_blade(blade)
        terms[canonical] = terms.get(canonical, 0) + sign * coords[..., k]
    return terms


def from_canonical(terms, blades, like):
    """Read storage components back out of {canonical_blade: value}."""
    components = []
    for blade in blades:
        canonical, sign = canonical_blade(blade)
        components.append(sign * terms.get(canonical, torch.zeros_like(like)))
    return torch.stack(components, dim=-1)


def wedge(a_terms, b_terms):
    result = {}
    for (ba, va), (bb, vb) in itertools.product(a_terms.items(), b_terms.items()):
        blade, sign = wedge_blades(ba, bb)
        if sign == 0:
            continue
        result[blade] = result.get(blade, 0) + sign * va * vb
    return result


def complement_terms(terms, complement):
    result = {}
    for blade, value in terms.items():
        rest, sign = complement(blade)
        result[rest] = result.get(rest, 0) + sign * value
    return result


def antiwedge(a_terms, b_terms):
    """a v b = lc(rc(a) ^ rc(b))."""
    joined = wedge(complement_terms(a_terms, right_complement), complement_terms(b_terms, right_complement))
    return complement_terms(joined, left_complement)


torch.manual_seed(0)
n = 64
p = torch.randn(n, 4, dtype=torch.float64)
q = torch.randn(n, 4, dtype=torch.float64)
l = torch.randn(n, 6, dtype=torch.float64)
f = torch.randn(n, 4, dtype=torch.float64)
g = torch.randn(n, 4, dtype=torch.float64)

checks = [
    (
        "point ^ point",
        from_canonical(wedge(to_canonical(p, point_blades), to_canonical(q, point_blades)), line_blades, p[..., 0]),
        join(Point.from_tensor(p), Point.from_tensor(q)).coords,
    ),
    (
        "line ^ point",
        from_canonical(wedge(to_canonical(l, line_blades), to_canonical(p, point_blades)), plane_blades, p[..., 0]),
        join(Line.from_tensor(l), Point.from_tensor(p)).coords,
    ),
    (
        "plane & plane",
        from_canonical(antiwedge(to_canonical(f, plane_blades), to_canonical(g, plane_blades)), line_blades, f[..., 0]),
        meet(Plane.from_tensor(f), Plane.from_tensor(g)).coords,
    ),
    (
        "line & plane",
        from_canonical(antiwedge(to_canonical(l, line_blades), to_canonical(f, plane_blades)), point_blades, f[..., 0]),
        meet(Line.from_tensor(l), Plane.from_tensor(f)).coords,
    ),
]

errors = 0
for name, derived, kernel in checks:
    if torch.allclose(derived, kernel):
        print(f"  {name}: OK")
    else:
        errors += 1
        worst = (derived - kernel).abs().max().item()
        print(f"  {name}: MISMATCH (max abs diff {worst:.3e})")

print(f"Found {errors} discrepancies")
