"""Example: shrink and grow a container under each resize strategy."""

from trisplit import LayoutState, format_layout, get_resize_strategy, RESIZE_STRATEGY_OPTIONS

SIZES = [850, 700, 600, 500, 455, 400, 385, 200, 600]


def main() -> None:
    for name in RESIZE_STRATEGY_OPTIONS:
        state = LayoutState(
            600,
            start_min=250,
            start_max=350,
            start_size=300,
            middle_min=130,
            end_min=5,
            end_max=150,
            end_size=100,
            resize_strategy=get_resize_strategy(name),
        )
        print(f"{name}:")
        for size in SIZES:
            state.set_size(size)
            print(f"  {format_layout(state.view)}")
        print(f"  ideals: start={state.start_ideal} middle={state.middle_ideal} end={state.end_ideal}")


if __name__ == "__main__":
    main()
