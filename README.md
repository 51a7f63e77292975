# incomelogit

incomelogit predicts whether a person's income is above or below 50K from census-style CSV data, such as the "adult" dataset. It fits L2-regularised logistic regression models with L-BFGS at several regularisation strengths. It keeps the model with the best training accuracy.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
incomelogit [data_path] [--test-size FRACTION]
```

- `data_path`: the header-less CSV file to read. The default is `adult/adult.data`, relative to the current directory.
- `--test-size`: the fraction of rows held back from training. The default is `0.2`.

The command loads and preprocesses the data and keeps the first `1 - test_size` share of the rows, in file order, for training. It then fits one model for each `alpha` of 0.1, 1.0 and 10.0, and prints:

```
Model trained successfully!
Best Training Accuracy: <accuracy>%
```

The accuracy is printed with two decimal places. If the file cannot be read, the data is malformed, or training fails, the command prints `Error: <message>` to standard error and exits with status 1.

## Data format

The data file is a CSV file with no header row, and every record must have the same number of fields. Blank lines are skipped. The last column is the label:

- `>50K` becomes 1.
- `<=50K` becomes 0.
- A row with any other label keeps its features but adds no label.

The other columns are features:

- **Numeric values** are read as floats. A numeric value with spaces around it is read as 0.0.
- **Categorical values** are those that do not parse as a number once trimmed. Within each column they are encoded as integers 0, 1, 2, … in the order in which they first appear.
- **Scaling**: each feature column is min-max scaled into `[0, 1]`. A column whose values are all the same becomes all zeros.

## Library use

```python
from incomelogit.data import load_and_preprocess_dataset, split_data
from incomelogit.model import train_and_tune_model, evaluate_model

features, labels = load_and_preprocess_dataset("adult/adult.data")
train_x, train_y, test_x, test_y = split_data(features, labels, 0.2)

model, train_accuracy = train_and_tune_model(train_x, train_y)
print(f"train: {train_accuracy:.2%}")
print(f"test:  {evaluate_model(model, test_x, test_y):.2%}")
```

### Modules

- `incomelogit.utils`
  - `is_categorical(value)`: returns True when the trimmed string is not a float.
  - `scale_features(features)`: min-max scales the columns of a 2-D matrix and returns a new array.
- `incomelogit.data`
  - `load_and_preprocess_dataset(file_path)`: returns the scaled feature matrix and the list of labels.
  - `split_data(features, labels, test_size)`: splits the rows in order and returns `(train_features, train_labels, test_features, test_labels)`.
  - `DatasetError`, a `ValueError`: raised for an empty dataset or for records whose field counts differ.
- `incomelogit.model`
  - `LogisticRegression(alpha)`: `fit(features, labels)` returns the fitted model and `predict(features)` returns a list of labels. With two classes the model is binary; with more it is multinomial. The L2 penalty applies to the weights, not to the intercepts.
  - `accuracy(predictions, labels)`: the fraction of predictions that match. It is NaN for empty input and raises `ValueError` when the lengths differ.
  - `evaluate_model(model, test_features, test_labels)`: the model's accuracy on the given data.
  - `train_and_tune_model(features, labels)`: returns `(model, training_accuracy)` for the best `alpha`.
  - `TrainingError`, a `ValueError`: raised in these cases:
    - the numbers of rows and labels differ;
    - there are fewer than two classes;
    - the optimisation diverges;
    - an unfitted model is used;
    - a feature matrix has the wrong number of columns;
    - no model reaches an accuracy above zero.
- `incomelogit.cli`
  - `main(argv=None)`: the command-line entry point. It returns the exit status.

## Limitations

- The command reports only training accuracy. To get accuracy on the held-out rows, call `evaluate_model` from Python.
- Trained models are not saved to disk.
- Rows are not shuffled before splitting.

## Running the tests

```
pytest
```