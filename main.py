import argparse
import logging
import sys

from analyzer import CircleAnalyzer, Config
from circlefit.circle_fitting import Fitted


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Fit a circle to x,y points. Without files, opens the GUI.")
    parser.add_argument("files", nargs="*", help="CSV files with x,y columns")
    parser.add_argument("--unit", choices=["in", "mm"], default="in",
                        help="display unit (labels and precision only)")
    parser.add_argument("--plot", metavar="PNG",
                        help="save a preview plot of the fit")
    parser.add_argument("--residuals", metavar="CSV",
                        help="save per-point residuals of the fit")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if len(args.files) > 1 and (args.plot or args.residuals):
        parser.error("--plot and --residuals take a single input file")
    return args


def run_cli(args) -> int:
    config = Config(
        unit=args.unit,
        draw_plot=args.plot is not None,
        plot_path=args.plot or Config.plot_path,
        residuals_path=args.residuals,
    )
    analyzer = CircleAnalyzer(config)

    status = 0
    for path in args.files:
        try:
            report = analyzer.analyze_file(path)
        except (OSError, RuntimeError) as e:
            print(f"Error processing {path}: {e}", file=sys.stderr)
            status = 1
            continue
        if not isinstance(report["result"], Fitted):
            status = 1
    return status


def run_gui() -> int:
    import matplotlib
    matplotlib.use('QtAgg')
    from PyQt6.QtWidgets import QApplication
    from gui import CircleFitGUI

    app = QApplication(sys.argv)
    window = CircleFitGUI()
    window.show()
    return app.exec()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")
    if args.files:
        return run_cli(args)
    return run_gui()


if __name__ == "__main__":
    sys.exit(main())
