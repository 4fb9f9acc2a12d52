"""Example: drag the side segments directly with both side strategies."""

from trisplit import LayoutState, SIDE_RESIZE_STRATEGY_OPTIONS, format_layout, format_layout_details, get_side_resize_strategy


def main() -> None:
    for name in SIDE_RESIZE_STRATEGY_OPTIONS:
        state = LayoutState(
            600,
            start_min=250,
            start_max=600,
            start_size=300,
            middle_min=130,
            end_min=5,
            end_max=600,
            end_size=100,
            side_resize_strategy=get_side_resize_strategy(name),
        )
        print(f"{name}:")
        for target in (400, 600, 250):
            state.set_start_size(target)
            print(f"  start -> {target}: {format_layout(state.view)}")
        state.set_end_size(None)
        print(f"  end collapsed: {format_layout(state.view)}")
        state.set_size(450)
        print("  after shrinking the container:")
        for line in format_layout_details(state.view).splitlines():
            print(f"    {line}")


if __name__ == "__main__":
    main()
