""" Command line entry point: train, predict, split and charts. """

import argparse
import sys
from typing import List, Optional

from titanic.charts import Visualizer
from titanic.dataset import TEST_PATH, TRAIN_PATH, VALID_PATH, Dataset
from titanic.errors import TitanicError
from titanic.predict import SUBMISSION_PATH, predict
from titanic.split import split
from titanic.training import MODEL_PATH, PROFILES, get_profile, train


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='titanic', description='Titanic survival classifier.')
    commands = parser.add_subparsers(dest='command', required=True)

    p = commands.add_parser('train', help='train the model on the train/validation files')
    p.add_argument('--profile', choices=sorted(PROFILES), default='adam')
    p.add_argument('--epochs', type=int)
    p.add_argument('--optimizer', choices=['adam', 'sgd'])
    p.add_argument('--lr', dest='learning_rate', type=float)
    p.add_argument('--clip', dest='grad_clip', type=float, help='max global gradient norm')
    p.add_argument('--loss', choices=['bce', 'mse'])
    p.add_argument('--seed', type=int)
    p.add_argument('--hidden-size', type=int)
    p.add_argument('--train', dest='train_path', default=TRAIN_PATH)
    p.add_argument('--valid', dest='valid_path', default=VALID_PATH)
    p.add_argument('--model', dest='model_path', default=MODEL_PATH)

    p = commands.add_parser('predict', help='write predictions for the test file')
    p.add_argument('--model', dest='model_path', default=MODEL_PATH)
    p.add_argument('--test', dest='test_path', default=TEST_PATH)
    p.add_argument('--output', dest='output_path', default=SUBMISSION_PATH)
    p.add_argument('--hidden-size', type=int, default=64)

    p = commands.add_parser('split', help='split a labeled file into train/validation files')
    p.add_argument('--source', default='data/titanic.csv')
    p.add_argument('--train', dest='train_path', default=TRAIN_PATH)
    p.add_argument('--valid', dest='valid_path', default=VALID_PATH)
    p.add_argument('--test-size', type=float, default=0.2)
    p.add_argument('--seed', type=int, default=42)

    p = commands.add_parser('charts', help='render exploratory charts of a labeled file')
    p.add_argument('--data', default=TRAIN_PATH)
    p.add_argument('--out-dir', default='charts')
    return parser


def run(args: argparse.Namespace) -> None:
    if args.command == 'train':
        config = get_profile(
            args.profile,
            epochs=args.epochs,
            optimizer=args.optimizer,
            learning_rate=args.learning_rate,
            grad_clip=args.grad_clip,
            loss=args.loss,
            seed=args.seed,
            hidden_size=args.hidden_size,
            train_path=args.train_path,
            valid_path=args.valid_path,
            model_path=args.model_path,
        )
        train(config)
    elif args.command == 'predict':
        predict(args.model_path, args.test_path, args.output_path, hidden_size=args.hidden_size)
    elif args.command == 'split':
        split(args.source, args.train_path, args.valid_path, test_size=args.test_size, seed=args.seed)
    elif args.command == 'charts':
        Visualizer(Dataset.training(args.data), args.out_dir).render_all()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except TitanicError as err:
        print(f'error: {err}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
