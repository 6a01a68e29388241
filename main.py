"""
Main Entry Point for the GA Fit Project

This script fits a gaussian probability density to a generated dataset with
the genetic algorithm and compares the result with the maximum-likelihood fit.
It handles command-line arguments for configuration, generates the data,
runs the optimization loop, and reports the final results.

Usage:
    python main.py [--nmc <N>] [--max-generations <N>] [--population-size <N>] [--run-tests]

Example:
    python main.py --nmc 10000 --accept-threshold 0.85 --run-tests --output-dir figures
"""
import argparse
import json
import logging
import math
import os

from tqdm import tqdm

from ga_fit.evolution.components import create_genetic_algorithm, merge_config
from ga_fit.evolution.components.handlers import EarlyStoppingHandler, LoggingHandler
from ga_fit.data import (
    sample_gaussian, histogram_density, reference_gaussian_fit, reference_function,
    fill_figure_of_merit
)

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "figures"


def build_config(args) -> dict:
    """Merges the optional JSON config file with the command-line overrides."""
    config = {}
    if args.config:
        with open(args.config) as f:
            config = json.load(f)
    config = merge_config(config)

    overrides = {
        ('data', 'n_samples'): args.nmc,
        ('data', 'mean'): args.mean,
        ('data', 'sigma'): args.sigma,
        ('fitness', 'accept_threshold'): args.accept_threshold,
        ('population', 'mutate_rate'): args.mutate_rate,
        ('population', 'mutation_size'): args.mutate_size,
        ('population', 'seed'): args.seed,
        ('evolution', 'generations'): args.max_generations,
        ('evolution', 'population_size'): args.population_size,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            config[section][key] = value

    # The starting point follows the generated distribution unless configured.
    data_config = config['data']
    if config['model']['function'] == 'gaussian' and config['model']['parameters'] is None:
        sigma = data_config['sigma']
        config['model']['parameters'] = [1.0 / (sigma * math.sqrt(2 * math.pi)),
                                         data_config['mean'], sigma]
    return config


def run(config: dict, run_tests: bool = False, patience: int = None, output_dir: str = None):
    """Runs one fit and returns (result, dataset, reference function)."""
    if run_tests and not output_dir:
        output_dir = DEFAULT_OUTPUT_DIR
        logger.warning(f"--run-tests given without --output-dir, writing figures to {output_dir}/")

    print("Algorithm Configuration:")
    print(f"  ==> nmc = {config['data']['n_samples']}")
    print(f"  ==> acceptThreshold = {config['fitness']['accept_threshold']}")
    print(f"  ==> mutateRate = {config['population']['mutate_rate']}")
    print(f"  ==> mutateSize = {config['population']['mutation_size']}")
    print(f"  ==> maxGenerations = {config['evolution']['generations']}")
    print(f"  ==> populationSize = {config['evolution']['population_size']}")

    # --- 1. Generate the dataset ---
    data_config = config['data']
    mean, sigma = data_config['mean'], data_config['sigma']
    samples = sample_gaussian(data_config['n_samples'], mean, sigma, seed=config['population']['seed'])
    df = histogram_density(samples, mean - 5 * sigma, mean + 5 * sigma, data_config['n_bins'])
    reference = reference_function(reference_gaussian_fit(samples))

    # --- 2. Configure the figure of merit, population and algorithm ---
    algorithm, population, fom = create_genetic_algorithm(config)
    fill_figure_of_merit(fom, df)

    function = population.get_function()
    print("Input parameters:")
    print("  ==> " + function.describe().replace("\n", "\n  ==> "))

    algorithm.add_handler(LoggingHandler(log_every=100, level=logging.DEBUG))
    if patience:
        algorithm.add_handler(EarlyStoppingHandler(patience=patience))

    # --- 3. Run the optimization loop ---
    algorithm.initialize(population)
    # the loop stops once the counter exceeds the cap, so up to generations + 1 steps run
    with tqdm(total=config['evolution']['generations'] + 1, desc="Generation") as pbar:
        while algorithm.next_generation():
            best = population.get_best_fitted()
            pbar.set_description(f"Gen {algorithm.get_current_generation()} | Best: {best.get_score():.4g}")
            pbar.update(1)

    result = algorithm.get_result(config)
    best_function = result.best_model.get_function()

    # --- 4. Report ---
    print(f"Done after {result.generations_completed} generations.")
    print(f"  ==> Best score is: {result.best_score}")
    print("After GA fit:")
    for i in range(best_function.parameter_count()):
        print(f"  ==> {best_function.get_parameter_name(i)} : {best_function.get_parameter(i):.6g}")
    print("After Likelihood fit:")
    for i in range(reference.parameter_count()):
        print(f"  ==> {reference.get_parameter_name(i)} : {reference.get_parameter(i):.6g}")

    if output_dir:
        from ga_fit.utils import plot_fit, plot_score_history

        os.makedirs(output_dir, exist_ok=True)
        plot_fit(df, best_function, reference, generation=result.generations_completed,
                 save_path=os.path.join(output_dir, 'C_fit.png'))
        if run_tests:
            history = result.to_dataframe()
            history.to_csv(os.path.join(output_dir, 'score_history.csv'))
            plot_score_history(history, save_path=os.path.join(output_dir, 'C_Score.png'))

    return result, df, reference


def main():
    """Main execution function."""
    parser = argparse.ArgumentParser(description="Genetic Algorithm Gaussian Fit")
    parser.add_argument("-n", "--nmc", type=int, default=None,
                        help="Number of toy MC experiments used to build the dataset.")
    parser.add_argument("-m", "--mean", type=float, default=None,
                        help="Mean of the gaussian distribution used to generate the dataset.")
    parser.add_argument("-s", "--sigma", type=float, default=None,
                        help="Width (sigma) of the gaussian distribution used to generate the dataset.")
    parser.add_argument("-a", "--accept-threshold", type=float, default=None,
                        help="Score threshold to accept a model as a final answer.")
    parser.add_argument("-R", "--mutate-rate", type=float, default=None,
                        help="Rate at which models are subjected to mutation.")
    parser.add_argument("-S", "--mutate-size", type=float, default=None,
                        help="Relative size of the mutation whenever applied.")
    parser.add_argument("-G", "--max-generations", type=int, default=None,
                        help="Maximum number of generations before aborting the optimization loop.")
    parser.add_argument("-N", "--population-size", type=int, default=None,
                        help="Size of the population to be evolved.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file.")
    parser.add_argument("--patience", type=int, default=None,
                        help="Stop after this many generations without improvement.")
    parser.add_argument("-t", "--run-tests", action="store_true",
                        help="Record and plot the score history alongside the main algorithm.")
    parser.add_argument("--output-dir", type=str, default=None,
                        help=f"Directory for figures (default with --run-tests: {DEFAULT_OUTPUT_DIR}).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    config = build_config(args)
    run(config, run_tests=args.run_tests, patience=args.patience, output_dir=args.output_dir)


if __name__ == "__main__":
    main()
