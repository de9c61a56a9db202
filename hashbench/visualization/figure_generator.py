# -*- coding: utf-8 -*-
"""Visualization module for benchmark figures."""

import os
from typing import List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from hashbench.benchmark.metrics_collector import Report

plt.rcParams['font.family'] = 'serif'
plt.rcParams['mathtext.fontset'] = 'stix'
plt.rcParams['axes.unicode_minus'] = False
plt.rcParams['font.size'] = 11
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 12
plt.rcParams['legend.fontsize'] = 10

plt.rcParams['figure.dpi'] = 150
plt.rcParams['savefig.bbox'] = 'tight'
plt.rcParams['savefig.pad_inches'] = 0.05


class FigureGenerator:
    """Generator for benchmark figures."""

    def __init__(self, output_dir: str, dpi: int = 300):
        self.output_dir = output_dir
        self.dpi = dpi

        self.operation_styles = {
            'SHA-256': {'color': '#0072B2', 'marker': 'o', 'linestyle': '-'},
            'MD5': {'color': '#009E73', 'marker': 's', 'linestyle': '--'},
            'FaultyOp': {'color': '#D55E00', 'marker': '^', 'linestyle': '-.'},
        }

        os.makedirs(os.path.join(output_dir, 'svg'), exist_ok=True)
        os.makedirs(os.path.join(output_dir, 'png'), exist_ok=True)

    def save_figure(self, fig, filename: str) -> List[str]:
        """Save figure as SVG and PNG."""
        svg_path = os.path.join(self.output_dir, 'svg', f'{filename}.svg')
        png_path = os.path.join(self.output_dir, 'png', f'{filename}.png')

        fig.savefig(svg_path, format='svg', bbox_inches='tight',
                    facecolor='white', edgecolor='none', pad_inches=0.05)
        fig.savefig(png_path, format='png', dpi=self.dpi, bbox_inches='tight',
                    facecolor='white', edgecolor='none', pad_inches=0.05)

        print(f"  Saved: {filename}")
        plt.close(fig)
        return [svg_path, png_path]

    def plot_mean_times(self, report: Report, filename: str = 'mean_time_by_size') -> List[str]:
        """Mean time per invocation against input size, one series per operation."""
        fig, ax = plt.subplots(figsize=(8, 5))

        for operation in report.operations:
            summaries = [s for c, s in report.items()
                         if c.operation == operation and s.successes > 0]
            if not summaries:
                continue

            style = self.operation_styles.get(operation, {'color': '#333333', 'marker': 'o', 'linestyle': '-'})
            sizes = np.array([s.case.size for s in summaries])
            means = np.array([s.mean_ms for s in summaries])
            errors = np.array([s.ci_upper_ms - s.mean_ms for s in summaries])

            ax.errorbar(sizes, means, yerr=errors, label=operation,
                        color=style['color'], marker=style['marker'],
                        linestyle=style['linestyle'], capsize=3, linewidth=1.5)

        ax.set_xscale('log')
        ax.set_yscale('log')
        ax.set_xlabel('Input size (bytes)')
        ax.set_ylabel('Mean time per call (ms)')
        ax.grid(True, which='both', alpha=0.3)
        if ax.get_legend_handles_labels()[0]:
            ax.legend(loc='upper left', framealpha=0.9)

        plt.tight_layout()
        return self.save_figure(fig, filename)

    def plot_failure_rates(self, report: Report, filename: str = 'failure_rate_by_case') -> List[str]:
        """Bar chart of failure rate per case."""
        fig, ax = plt.subplots(figsize=(8, 4))

        labels = [case.label for case in report]
        rates = [report[case].failure_rate for case in report]
        colors = [self.operation_styles.get(case.operation, {}).get('color', '#333333')
                  for case in report]

        x = np.arange(len(labels))
        ax.bar(x, rates, color=colors, edgecolor='white')
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=45, ha='right', fontsize=8)
        ax.set_ylim(0, 1)
        ax.set_ylabel('Failure rate')
        ax.grid(True, axis='y', alpha=0.3)

        plt.tight_layout()
        return self.save_figure(fig, filename)

    def generate_all_figures(self, report: Report) -> List[str]:
        paths = []
        paths.extend(self.plot_mean_times(report))
        paths.extend(self.plot_failure_rates(report))
        return paths
