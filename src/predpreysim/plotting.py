from __future__ import annotations

from typing import Dict, List, Optional


def plot_history(history: Dict[str, List[float]], out_path: Optional[str] = None) -> None:
    try:
        import matplotlib.pyplot as plt
    except Exception as exc:
        raise RuntimeError("matplotlib is required for plotting") from exc

    ticks = history.get("tick", [])
    fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    ax.plot(ticks, history.get("prey_count", []), label="prey", color="orange")
    ax.plot(ticks, history.get("predator_count", []), label="predator", color="blue")
    ax.set_xlabel("step")
    ax.set_ylabel("population")
    ax.legend()

    fig.tight_layout()
    if out_path:
        fig.savefig(out_path)
        plt.close(fig)
    else:
        plt.show()
