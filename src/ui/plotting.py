
import matplotlib.patches as patches
import matplotlib.pyplot as plt
import numpy as np


def _bar_centers(b, num_bars):
    if num_bars == 1:
        return np.array([b / 2])
    return np.linspace(b * 0.15, b * 0.85, num_bars)


def draw_cross_section(res):
    """Section outline, compression zone, bars and dimension callouts."""
    b, h, d, a, c = res.b, res.h, res.d, res.a, res.c
    u = res.units
    steel_y = res.steel_level

    fig, ax = plt.subplots(figsize=(4, 4.5))
    ax.add_patch(patches.Rectangle((0, 0), b, h, linewidth=2, edgecolor='#333333', facecolor='#d9d9d9'))

    # Compression zone
    a_draw = min(a, h)
    ax.add_patch(patches.Rectangle((0, h - a_draw), b, a_draw, linewidth=0,
                                   facecolor='#ffcccc', alpha=0.7))

    bar_r = min(np.sqrt(res.bar_area / np.pi) * 0.8, b / (2 * res.num_bars + 2))
    for x in _bar_centers(b, res.num_bars):
        ax.add_patch(patches.Circle((x, steel_y), bar_r, facecolor='#333333', edgecolor='black'))

    # h
    ax.plot([b * 1.1, b * 1.1], [0, h], 'k-', linewidth=1)
    ax.plot([b, b * 1.15], [0, 0], 'k-', linewidth=0.8)
    ax.plot([b, b * 1.15], [h, h], 'k-', linewidth=0.8)
    ax.text(b * 1.15, h / 2, f"h = {h:.1f} {u.length}", fontsize=8, va='center')

    # d
    ax.plot([b * 1.3, b * 1.3], [steel_y, h], 'b-', linewidth=1)
    ax.text(b * 1.35, (h + steel_y) / 2, f"d = {d:.1f} {u.length}", color='blue', fontsize=8, va='center')

    # a
    ax.plot([-b * 0.1, -b * 0.1], [h - a_draw, h], 'r-', linewidth=2)
    ax.text(-b * 0.12, h - a_draw / 2, f"a = {a:.2f} {u.length}", color='red', fontsize=8,
            ha='right', va='center')

    # c
    if c <= h:
        ax.plot([0, b], [h - c, h - c], 'k--', linewidth=1)
        ax.text(b / 2, h - c + h * 0.03, f"c = {c:.2f}", ha='center', fontsize=7)

    # b
    ax.text(b / 2, -h * 0.08, f"b = {b:.1f} {u.length}", ha='center', fontsize=8)

    ax.set_title("Cross Section", fontsize=10, fontweight='bold')
    ax.set_xlim(-b * 0.7, b * 1.9)
    ax.set_ylim(-h * 0.15, h * 1.1)
    ax.set_aspect('equal')
    ax.axis('off')
    fig.tight_layout()
    return fig


def draw_strain_profile(res):
    """Linear strain profile with epsilon_cu at the top fiber and epsilon_s at the steel."""
    b, h, c = res.b, res.h, res.c
    steel_y = res.steel_level
    eps_cu, eps_s = res.epsilon_cu, res.epsilon_s
    na_y = h - c

    fig, ax = plt.subplots(figsize=(3.5, 4.5))
    x_scale = b * 0.5 / max(eps_cu, abs(eps_s))

    x_top = -eps_cu * x_scale
    x_steel = eps_s * x_scale
    ax.fill([0, x_top, x_steel, 0], [h, h, steel_y, steel_y],
            facecolor='#cce0ff', edgecolor='blue', linewidth=1.5)

    ax.plot([0, 0], [0, h], 'k-', linewidth=1)
    ax.plot([-b * 0.6, b * 0.6], [na_y, na_y], 'k:', linewidth=1)
    ax.text(-b * 0.62, na_y, "N.A.", fontsize=8, ha='right', va='center')

    ax.text(x_top, h + h * 0.03, rf"$\varepsilon_{{cu}}$ = {eps_cu:.4f}", fontsize=8,
            color='blue', ha='center')
    ax.text(x_steel, steel_y - h * 0.06, rf"$\varepsilon_s$ = {eps_s:.5f}", fontsize=8,
            color='blue', ha='center')
    ax.text(b * 0.05, h - c / 2, f"c = {c:.2f}", fontsize=8)

    ax.set_title("Strain Profile", fontsize=10, fontweight='bold')
    ax.set_xlim(-b * 0.9, b * 0.9)
    ax.set_ylim(-h * 0.1, h * 1.12)
    ax.axis('off')
    fig.tight_layout()
    return fig


def draw_stress_diagram(res):
    """Equivalent stress block with the C and T resultants and the lever arm d - a/2."""
    b, h, a, c = res.b, res.h, res.a, res.c
    u = res.units
    steel_y = res.steel_level
    a_draw = min(a, h)
    block_w = b * 0.6
    force_label = u.force_k

    fig, ax = plt.subplots(figsize=(4, 4.5))
    ax.add_patch(patches.Rectangle((0, h - a_draw), block_w, a_draw, linewidth=1.5,
                                   edgecolor='red', facecolor='#ffb3b3'))
    ax.text(block_w / 2, h - a_draw / 2, "0.85 f'c", ha='center', va='center', fontsize=8)

    c_y = h - a_draw / 2
    ax.annotate("", xy=(block_w * 1.1, c_y), xytext=(block_w * 1.6, c_y),
                arrowprops=dict(arrowstyle='->', color='red', linewidth=2))
    ax.text(block_w * 1.65, c_y, f"C = {res.T_display:.1f} {force_label}", color='red',
            fontsize=8, va='center')

    ax.annotate("", xy=(block_w * 0.6, steel_y), xytext=(-block_w * 0.1, steel_y),
                arrowprops=dict(arrowstyle='->', color='blue', linewidth=2))
    ax.text(block_w * 0.65, steel_y, f"T = {res.T_display:.1f} {force_label}", color='blue',
            fontsize=8, va='center')

    arm_x = block_w * 2.6
    ax.plot([arm_x, arm_x], [c_y, steel_y], color='green', linewidth=1.5)
    ax.text(arm_x + block_w * 0.1, (c_y + steel_y) / 2,
            f"d - a/2 = {res.moment_arm:.2f} {u.length}", color='darkgreen', fontsize=8, va='center')

    ax.plot([0, 0], [0, h], 'k-', linewidth=1)
    if c <= h:
        ax.plot([-b * 0.2, arm_x], [h - c, h - c], 'k:', linewidth=1)

    ax.set_title("Stresses & Forces", fontsize=10, fontweight='bold')
    ax.set_xlim(-b * 0.3, arm_x + block_w * 1.6)
    ax.set_ylim(-h * 0.1, h * 1.1)
    ax.axis('off')
    fig.tight_layout()
    return fig
