import math
import matplotlib.pyplot as plt

ALPHA = 64 / 255


def title(di):
    function = di.function.replace(' ', '')
    return (f"Integral of {function} from {di.initial_x:.2f} "
            f"to {di.end_x:.2f} = {di.result:.4f}")


def _range(values):
    finite = [v for v in values if math.isfinite(v)]
    if not finite:
        return None

    return min(finite), max(finite)


def render(di, fname="output.png"):
    xs = di.xs
    ys = di.ys

    fig, ax = plt.subplots()
    try:
        ax.plot(xs, ys, color='C0', alpha=ALPHA)
        ax.fill_between(xs, ys, color='C1', alpha=ALPHA)
        ax.set_title(title(di))
        ax.set_xlabel('x')
        ax.set_ylabel('f(x)')

        xlim = _range(xs)
        if xlim is not None and xlim[0] < xlim[1]:
            ax.set_xlim(*xlim)

        ylim = _range(ys)
        if ylim is not None and ylim[0] < ylim[1]:
            ax.set_ylim(*ylim)

        fig.savefig(fname, format='png')
    finally:
        plt.close(fig)

    return fname
