import pytest

from playnet.config import INPUT_FEATURES, NetworkConfig, construct_input
from playnet.exceptions import ConfigurationError
from playnet.functions import activations, errors, regularizations


def test_defaults():
    config = NetworkConfig()

    assert config.full_shape == [2, 4, 1]
    assert config.learning_rate == 0.03
    assert config.regularization_rate == 0.01
    assert config.batch_size == 10
    assert config.activation_fn is activations.SIGMOID
    assert config.output_activation_fn is activations.TANH
    assert config.regularization_fn is None
    assert config.error_fn is errors.SQUARE
    assert not config.init_zero


def test_output_activation_follows_problem():
    assert NetworkConfig(problem='regression').output_activation_fn is activations.LINEAR
    config = NetworkConfig(problem='regression', output_activation='relu')
    assert config.output_activation_fn is activations.RELU


def test_resolves_named_functions():
    config = NetworkConfig(activation='gelu', regularization='L1', error='hinge',
                           network_shape=[3, 2], input_features=['x', 'y', 'xTimesY'])

    assert config.activation_fn is activations.GELU
    assert config.regularization_fn is regularizations.L1
    assert config.error_fn is errors.HINGE
    assert config.full_shape == [3, 3, 2, 1]


def test_none_regularization():
    assert NetworkConfig(regularization='none').regularization is None


@pytest.mark.parametrize('settings', [
    {'activation': 'softmax'},
    {'output_activation': 'nope'},
    {'error': 'cosine'},
    {'regularization': 'L3'},
    {'problem': 'clustering'},
    {'batch_size': 0},
    {'network_shape': [4, 0]},
    {'input_features': []},
    {'input_features': ['x', 'z']},
])
def test_invalid_settings(settings):
    with pytest.raises(ConfigurationError):
        NetworkConfig(**settings)


def test_dict_round_trip():
    config = NetworkConfig(learning_rate=0.1, regularization='elastic net', error='huber',
                           network_shape=[5], input_features=['xSquared', 'ySquared'], seed=3)
    settings = config.to_dict()

    assert settings['regularization'] == 'elastic net'
    assert settings['output_activation'] == 'tanh'
    assert NetworkConfig.from_dict(settings) == config


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigurationError, match='Unknown configuration keys'):
        NetworkConfig.from_dict({'learningRate': 0.1})


def test_construct_input():
    assert construct_input(2.0, 3.0, ['x', 'y', 'xTimesY', 'xSquared', 'ySquared']) == [2.0, 3.0, 6.0, 4.0, 9.0]
    assert construct_input(0.0, 0.0, ['sinX', 'sinY']) == [0.0, 0.0]
    with pytest.raises(ConfigurationError):
        construct_input(1.0, 1.0, ['w'])


def test_every_feature_has_a_function():
    for feature, fn in INPUT_FEATURES.items():
        assert isinstance(fn(0.5, -0.5), float)
