import pytest

from tests.networks import SAMPLE_LINES, network, sample_network


@pytest.fixture
def sample():
    #  JJ(21)-II-AA-BB(13)
    #            |  |
    #            DD(20)-CC(2)
    #            |
    #            EE(3)-FF-GG-HH(22)
    return sample_network()


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n")
    return str(path)


@pytest.fixture
def two_branches():
    #  XX(5)-X1-AA-Y1-YY(5)
    return network(
        {"AA": 0, "X1": 0, "XX": 5, "Y1": 0, "YY": 5},
        [("AA", "X1"), ("X1", "XX"), ("AA", "Y1"), ("Y1", "YY")],
    )


@pytest.fixture
def shared_star():
    #        BB(10)
    #        |
    #  CC(1)-AA-DD(4)
    return network(
        {"AA": 0, "BB": 10, "CC": 1, "DD": 4},
        [("AA", "BB"), ("AA", "CC"), ("AA", "DD")],
    )
