import time
import numpy as np

from .helpers.logger import RunLogger


class Trainer:
    """
    Drives a NeuralNetwork over a dataset of (input, target) pairs, one
    sample at a time: forward -> compute_error -> backward.
    """

    def __init__(
        self,
        network,
        epochs=1000,
        verbose=1,
        log_every=None,
        runs_root=None,
        tag="xor",
    ):
        if epochs < 0:
            raise ValueError(f"epochs must be >= 0, got {epochs}")
        if log_every is not None and log_every < 1:
            raise ValueError(f"log_every must be >= 1, got {log_every}")
        self.network = network
        self.epochs = epochs
        self.verbose = verbose
        self.log_every = log_every if log_every is not None else max(1, epochs // 10)
        self.runs_root = runs_root
        self.tag = tag
        self.logger = None

    def fit(self, dataset):
        history = {"loss": []}
        if self.runs_root is not None:
            self.logger = RunLogger(root=self.runs_root, tag=self.tag)

        if self.verbose > 0:
            print(f"Starting training for {self.epochs} epochs...")
        for ep in range(1, self.epochs + 1):
            t0 = time.time()
            sq_err = 0.0
            n = 0
            for x, target in dataset:
                output = self.network.forward(x)
                error = self.network.compute_error(output, target)
                self.network.backward(error)
                sq_err += float(np.sum(error**2))
                n += error.size
            loss = sq_err / n if n else 0.0
            history["loss"].append(loss)

            if self.verbose > 0:
                if ep % self.log_every == 0 or ep == 1 or ep == self.epochs:
                    print(f"Epoch {ep}/{self.epochs} - loss: {loss:.6f}")

            if self.logger is not None:
                self.logger.log_epoch(ep, time_s=time.time() - t0, loss=loss)

        if self.logger is not None:
            self.logger.save_json(
                extra={
                    "topology": list(self.network.topology),
                    "learning_rate": self.network.learning_rate,
                    "update_rule": self.network.update_rule.value,
                }
            )
            self.logger.plot_loss(history)
        return history

    def predict(self, dataset):
        return [(x, self.network.forward(x)) for x in dataset.inputs()]

    def evaluate(self, dataset, threshold=0.5):
        correct = 0
        sq_err = 0.0
        n = 0
        for x, target in dataset:
            output = self.network.forward(x)
            error = self.network.compute_error(output, target)
            sq_err += float(np.sum(error**2))
            n += error.size
            preds = (output >= threshold).astype(int)
            correct += int(np.all(preds == target.astype(int)))
        return {
            "accuracy": correct / len(dataset),
            "loss": sq_err / n,
        }

    def report(self, dataset):
        predictions = self.predict(dataset)
        for x, output in predictions:
            bits = ",".join(str(int(v)) for v in x)
            shown = output[0] if output.size == 1 else ", ".join(str(v) for v in output)
            print(f"Input: {bits}, Predicted Output: {shown}")
        return predictions
