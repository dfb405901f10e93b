# gridreinforce

gridreinforce trains a small policy network with the REINFORCE policy-gradient
algorithm. The agent learns to move through a 5×5 grid world from the top-left
corner to the goal in the bottom-right corner, and has to go around obstacles
on the way.

## Installation

```
pip install .
```

The package uses only the standard library. To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
gridreinforce
```

With no options, this trains an agent for 500 episodes, using a discount factor
of 0.99, a learning rate of 0.01 and seed 42. On episode 0, every tenth episode
after it and the last episode, it prints that episode's total reward and the
average reward over the last (up to) 100 episodes. On episode 0 and every 100th
episode after it, it also plays and draws an example episode. When training
ends, it plays one more episode with the trained policy and draws each step.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--episodes N` | 500 | number of training episodes |
| `--render-every N` | 100 | draw an example episode every N episodes; 0 turns this off |
| `--gamma X` | 0.99 | discount factor |
| `--learning-rate X` | 0.01 | learning rate |
| `--seed N` | 42 | seed for the network's starting weights and its sampled actions |

In the grid drawings, `A` marks the agent, `G` the goal, `#` an obstacle and
`.` an empty cell. A drawn episode stops at the goal or after 100 steps.

## Library use

```python
from gridreinforce.grid_world import GridWorldEnv, Action
from gridreinforce.policy_network import PolicyNetwork
from gridreinforce.reinforce import Reinforce, calculate_returns, normalize_returns

env = GridWorldEnv(5, 5)
state = env.reset()
state, reward, done = env.step(Action.RIGHT)
print(env.render(), end="")

agent = Reinforce(0.99, 0.01, 42)
trajectory, total_reward = agent.run_episode()
agent.update_policy(trajectory)
rewards = agent.train(50, 0, None)   # list of each episode's total reward
```

### `gridreinforce.grid_world`

- `Action` is an `IntEnum` of `UP`, `RIGHT`, `DOWN` and `LEFT` (0 to 3); its
  `label` gives the capitalised name.
- `GridWorldEnv(width, height)` needs a grid of at least 2×2, or it raises
  `ValueError`. The agent starts at `(0, 0)` and the goal is the bottom-right
  cell. Obstacles sit at `(1, 1)`, `(1, 2)`, `(2, 1)` and
  `(width - 2, height - 2)`.
- `reset()` puts the agent back at the start and returns the state.
- `step(action)` returns `(state, reward, done)`. Moves are clipped at the grid
  edge; an unknown action leaves the agent in place. Each step costs -0.1. A
  move into an obstacle earns -1.0, and the agent stays where it was. Reaching
  the goal earns 1.0 and ends the episode.
- `state_representation` is the agent's column and row, each scaled into the
  range 0 to 1. `action_space` is 4 and `state_size` is 2.
- `render()` returns the grid as text, one row per line, followed by a blank
  line.

### `gridreinforce.policy_network`

- `softmax(values)` and `relu(x)` are the activation functions.
- `PolicyNetwork(architecture, seed=42)` is a fully connected network with ReLU
  hidden layers and a softmax output. `architecture` lists the layer sizes and
  needs at least two positive entries. The seed sets both the starting weights
  and the actions it samples, so a run with a given seed can be repeated.
- `forward(inputs)` returns action probabilities, `sample_action(state)` draws
  an action from them, and `log_probability(state, action)` gives the log of
  one of them.
- `parameters()` returns copies of the weights and biases;
  `update_parameters(weight_gradients, bias_gradients, learning_rate)` adds
  `learning_rate` times each gradient to its parameter.

### `gridreinforce.reinforce`

- `calculate_returns(rewards, gamma)` gives the discounted return from each time
  step onwards; `normalize_returns(returns)` scales them to zero mean and unit
  standard deviation.
- `Transition` holds one step's `state`, `action`, `reward` and `done`.
- `Reinforce(discount_factor=0.99, learning_rate=0.01, seed=42)` holds a 5×5
  `GridWorldEnv` and a `PolicyNetwork` with one hidden layer of 16 units.
  `run_episode()` plays until the goal is reached, with no step limit.
  `train(...)` and `render_episode(...)` write their output to `out`, or to
  standard output when it is `None`.

## What it does not do

Trained policies live only in memory: there is no way to save a network to a
file or load one back, and the command line always starts from freshly
initialised weights.