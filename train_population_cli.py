#!/usr/bin/env python3
"""
Command-line training of the evolving ball population.
Runs the pymunk arena headless and prints text output.
"""

import argparse
import logging
import random
import sys
from dataclasses import asdict

from evoball.config.settings import load_config
from evoball.evaluation.metrics_collector import MetricsCollector
from evoball.exceptions import ConfigError, InvariantViolation
from evoball.training.trainer import Trainer

logger = logging.getLogger("evoball.cli")


class CLITrainer:
    """Command-line training session, restarting the world when a run is exhausted."""

    def __init__(self, config, seed=None, status_interval=500):
        self.config = config
        self.rng = random.Random(seed)
        self.status_interval = status_interval
        self.runs = []

    def run(self, max_ticks, restarts=0):
        """Run up to ``restarts + 1`` worlds sharing a total tick budget."""
        ticks_left = max_ticks
        for run_index in range(restarts + 1):
            if ticks_left <= 0:
                break

            metrics = MetricsCollector(status_log_interval=self.status_interval)
            trainer = Trainer(self.config, observer=metrics, rng=self.rng)
            print(f"\n🌍 World {run_index + 1}: {len(trainer.population)} balls, "
                  f"start {self.config.arena.start_position}")

            ticks_left -= trainer.run(max_ticks=ticks_left)
            self.runs.append((trainer, metrics))
            self.print_status(trainer, metrics)

            if not trainer.terminated:
                break

    def print_status(self, trainer, metrics):
        """Print the status line and success statistics of one world."""
        summary = metrics.get_summary()
        if metrics.last_status is not None:
            print(f"📊 {metrics.last_status.format()}")
        print(f"   Ticks: {summary['total_ticks']} | Successes: {summary['successes']}")
        if summary['successes']:
            print(f"   Episodes per success: mean {summary['mean_episodes_per_success']:.1f}, "
                  f"best {summary['best_episodes_per_success']}")

        stats = trainer.population.get_score_statistics()
        print(f"   Scores: min {stats['min']:.1f} | max {stats['max']:.1f} | mean {stats['mean']:.2f}")

        if trainer.state.last_successful_agent_id is not None:
            winner = trainer.population.get_agent(trainer.state.last_successful_agent_id)
            if winner is not None:
                winner_stats = winner.get_stats()
                print(f"   Last winner Q-table: {winner_stats['total_entries']} entries over "
                      f"{winner_stats['total_states']} states")

        if trainer.terminated:
            print("🔄 Episode budget exhausted, world reset")

    def export(self, path):
        """Write the iteration series of every world to one CSV file."""
        import pandas as pd

        frames = []
        for run_index, (_, metrics) in enumerate(self.runs):
            frame = metrics.iteration_frame()
            frame.insert(0, 'world', run_index + 1)
            frames.append(frame)
        if frames:
            pd.concat(frames, ignore_index=True).to_csv(path, index=False)
            print(f"💾 Iteration history written to {path}")


def main(argv=None):
    """Main function to run the CLI training."""
    parser = argparse.ArgumentParser(description='Evolving Q-learning ball population')
    parser.add_argument('--ticks', type=int, default=20000,
                        help='Total number of simulation ticks (default: 20000)')
    parser.add_argument('--population', type=int, default=None,
                        help='Number of balls (default: from config, 10)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible runs')
    parser.add_argument('--config', default=None,
                        help='JSON file overriding the default configuration')
    parser.add_argument('--restarts', type=int, default=0,
                        help='Fresh worlds to start after the episode budget runs out (default: 0)')
    parser.add_argument('--status-interval', type=int, default=500,
                        help='Log the status line every N ticks at DEBUG level (default: 500)')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')
    parser.add_argument('--export', default=None,
                        help='Write the per-success history to this CSV file')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        config = load_config(args.config)
        if args.population is not None:
            config.arena.population_size = args.population
            config.validate()
    except ConfigError as e:
        print(f"❌ Configuration error: {e}")
        return 2

    logger.info(f"Q-learning: {asdict(config.q_learning)}")
    logger.info(f"Evolution: {asdict(config.evolution)}")

    print("🤖 Starting evolving ball population training (CLI Version)")
    print("=" * 60)
    print("⏹️  Press Ctrl+C to stop training")
    print("=" * 60)

    session = CLITrainer(config, seed=args.seed, status_interval=args.status_interval)
    try:
        session.run(args.ticks, restarts=args.restarts)
    except KeyboardInterrupt:
        print("\n⏹️  Training stopped by user")
    except InvariantViolation as e:
        logger.error(f"Population corrupted, stopping: {e}")
        return 1

    if args.export:
        session.export(args.export)

    return 0


if __name__ == "__main__":
    sys.exit(main())
