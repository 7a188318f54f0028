"""
Example usage of circle analysis
"""
from analyzer import CircleAnalyzer, Config
from circlefit.data_io import sample_points
from circlefit.formatting import result_summary
from circlefit.visualization import save_fit_plot

def main():
    # Create configuration
    config = Config(
        unit = 'mm',
        draw_plot = True,
        plot_path = 'sample_fit.png',
    )

    # Create analyzer
    analyzer = CircleAnalyzer(config)

    # Fit the built-in sample profile
    report = analyzer.analyze_points(sample_points())
    print(result_summary(report["result"], config.unit, report["n_points"]))

    if config.draw_plot:
        save_fit_plot(report["points"], report["result"], config.unit, config.plot_path)
        print(f"Saved plot -> {config.plot_path}")

if __name__ == "__main__":
    main()
