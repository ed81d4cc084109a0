""" Exploratory charts of a labeled dataset, rendered to PNG files. """

import os
from collections import Counter
from typing import List, Sequence

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from scipy import stats

from titanic.dataset import Dataset


# ------------------------ Statistics helpers ------------------------
def mode(values: Sequence) -> List:
    """ All most frequent values, in first-seen order. """
    counts = Counter(values)
    if not counts:
        return []
    top = max(counts.values())
    return [k for k, v in counts.items() if v == top]


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    if len(x) != len(y):
        raise ValueError('Vectors must have the same length')
    r, _ = stats.pearsonr(np.asarray(x, dtype=float), np.asarray(y, dtype=float))
    return float(r)


def _survival_rate(survived, mask):
    total = np.count_nonzero(mask)
    return 0.0 if total == 0 else 100.0 * np.count_nonzero(survived[mask]) / total


def _bar_chart(path, labels, series, xlabel, ylabel, title=None):
    fig, ax = plt.subplots()
    width = 0.8 / len(series)
    positions = np.arange(len(labels))
    for i, (name, heights) in enumerate(series.items()):
        ax.bar(positions + i * width, heights, width=width, label=name)
    ax.set_xticks(positions + width * (len(series) - 1) / 2)
    ax.set_xticklabels(labels)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)
    if len(series) > 1:
        ax.legend()
    fig.savefig(path)
    plt.close(fig)
    return path


def _bin_labels(n_bins, bin_size=10):
    return [f'{i * bin_size}-{(i + 1) * bin_size}' for i in range(n_bins)]


class Visualizer:
    """ Draws the exploratory charts into `out_dir`. """

    def __init__(self, dataset: Dataset, out_dir: str = '.') -> None:
        self.dataset = dataset
        self.out_dir = out_dir

    def _path(self, name):
        return os.path.join(self.out_dir, name)

    def survive_by_class_bar_chart(self) -> str:
        classes = self.dataset.classes()
        survived = self.dataset.survived()
        alive = [int(np.count_nonzero((classes == c) & (survived == 1))) for c in (1, 2, 3)]
        dead = [int(np.count_nonzero((classes == c) & (survived == 0))) for c in (1, 2, 3)]
        return _bar_chart(self._path('survive_by_class_bar_chart.png'),
                          ['First Class', 'Second Class', 'Third Class'],
                          {'Survived': alive, 'Not Survived': dead},
                          'Passenger Class', 'Count')

    def age_histogram(self) -> str:
        # ages 0 to 100, older passengers fall outside the bins
        bins = np.zeros(10, dtype=int)
        for age in self.dataset.ages():
            index = int(age // 10)
            if index < len(bins):
                bins[index] += 1
        return _bar_chart(self._path('age_histogram.png'), _bin_labels(len(bins)),
                          {'Age Distribution': bins}, 'Age Bins', 'Frequency')

    def survive_by_sex_bar_chart(self) -> str:
        sexes = self.dataset.sexes()
        survived = self.dataset.survived()
        rates = [_survival_rate(survived, sexes == 1.0), _survival_rate(survived, sexes == 0.0)]
        return _bar_chart(self._path('survival_rate_by_sex.png'), ['Male', 'Female'],
                          {'Survival Rate': rates}, 'Sex', 'Survival Rate (%)',
                          title='Survival Rate by Sex')

    def fare_histogram(self) -> str:
        fares = self.dataset.fares()
        n_bins = max(1, int(np.ceil(fares.max() / 10.0)))
        bins = np.zeros(n_bins, dtype=int)
        for fare in fares:
            bins[min(int(fare // 10), n_bins - 1)] += 1
        return _bar_chart(self._path('fare_histogram.png'), _bin_labels(n_bins),
                          {'Fare Distribution': bins}, 'Fare Bins', 'Frequency',
                          title='Fare Histogram')

    def survive_by_age_bar_chart(self, n_bins: int = 8) -> str:
        ages = self.dataset.ages()
        survived = self.dataset.survived()
        index = (ages // 10).astype(int)
        rates = [_survival_rate(survived, index == i) for i in range(n_bins)]
        return _bar_chart(self._path('survival_rate_by_age.png'), _bin_labels(n_bins),
                          {'Survival Rate': rates}, 'Age Bins', 'Survival Rate (%)',
                          title='Survival Rate by Age')

    def scatter_plot(self, x_vals, y_vals, title: str, x_label: str, y_label: str) -> str:
        coef = pearson_correlation(x_vals, y_vals)
        fig, ax = plt.subplots()
        ax.scatter(x_vals, y_vals, s=8)
        ax.set_title(f'{title}: r = {coef:.2f}')
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_label)
        path = self._path(f'{x_label.lower()}_{y_label.lower()}_scatter.png')
        fig.savefig(path)
        plt.close(fig)
        return path

    def render_all(self) -> List[str]:
        os.makedirs(self.out_dir, exist_ok=True)
        survived = self.dataset.survived()
        paths = [
            self.survive_by_class_bar_chart(),
            self.age_histogram(),
            self.survive_by_sex_bar_chart(),
            self.fare_histogram(),
            self.survive_by_age_bar_chart(),
            self.scatter_plot(self.dataset.ages(), survived, 'Age vs Survival', 'Age', 'Survived'),
            self.scatter_plot(self.dataset.fares(), survived, 'Fare vs Survival', 'Fare', 'Survived'),
        ]
        print(f'Saved {len(paths)} charts to {self.out_dir}')
        return paths
