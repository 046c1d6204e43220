from xornet import NeuralNetwork, Trainer, UpdateRule, XORDataset


def run(
    topology=(2, 1, 1),
    learning_rate=0.001,
    epochs=1000,
    n_bits=2,
    update_rule=UpdateRule.WEIGHT_GATE,
    verbose=0,
    runs_root=None,
):
    dataset = XORDataset(n_bits=n_bits)

    model = NeuralNetwork(topology, learning_rate=learning_rate, update_rule=update_rule)
    trainer = Trainer(model, epochs=epochs, verbose=verbose, runs_root=runs_root, tag=f"xor{n_bits}")

    trainer.fit(dataset)

    print(f"Predicting XOR for {n_bits} inputs:")
    predictions = trainer.report(dataset)
    metrics = trainer.evaluate(dataset)
    print(f"Accuracy: {metrics['accuracy'] * 100:.2f}% | MSE: {metrics['loss']:.6f}")
    return predictions


if __name__ == "__main__":
    # Weight-gated updates, lr 0.001, 1000 epochs over the truth table
    run(topology=(2, 1, 1), learning_rate=0.001, epochs=1000)

    # Gradient-correct variant. Constant init keeps hidden units identical,
    # so a wider hidden layer does not help here
    run(
        topology=(2, 2, 1),
        learning_rate=0.5,
        epochs=10_000,
        update_rule=UpdateRule.SIGMOID_GRADIENT,
        verbose=1,
    )
