import pytest

HEADER = 'PassengerId,Survived,Pclass,Name,Sex,Age,SibSp,Parch,Ticket,Fare,Cabin,Embarked'
TEST_HEADER = 'PassengerId,Pclass,Name,Sex,Age,SibSp,Parch,Ticket,Fare,Cabin,Embarked'

TRAIN_LINES = [
    '1,1,1,"Cumings, Mrs. John Bradley",female,38,1,0,PC 17599,71.2833,C85,C',
    '2,1,1,"Futrelle, Mrs. Jacques Heath",female,35,1,0,113803,53.1,C123,S',
    '3,0,3,"Braund, Mr. Owen Harris",male,22,1,0,A/5 21171,7.25,,S',
    '4,0,3,"Allen, Mr. William Henry",male,35,0,0,373450,8.05,,S',
]

TEST_LINES = [
    '892,3,"Kelly, Mr. James",male,34.5,0,0,330911,7.8292,,Q',
    '893,3,"Wilkes, Mrs. James",female,47,1,0,363272,7,,S',
    '1044,3,"Storey, Mr. Thomas",male,,0,0,3701,,,S',
]


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, lines, header=HEADER):
        path = tmp_path / name
        path.write_text('\n'.join([header] + list(lines)) + '\n')
        return str(path)
    return _write


@pytest.fixture
def train_csv(write_csv):
    return write_csv('train.csv', TRAIN_LINES)


@pytest.fixture
def test_csv(write_csv):
    return write_csv('test.csv', TEST_LINES, header=TEST_HEADER)
