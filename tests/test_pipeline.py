import pytest
from unittest.mock import patch
from linfit.processing.pipeline import RegressionPipeline, RegressionReport
from linfit.ml.linear_regression import LinearRegressionModel
from linfit.ml.dataset import Dataset
from linfit.ml.errors import EmptyInputError, MalformedRecordError


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "lineal_dataset.csv"
    path.write_text("2,1\n4,2\nbad,line\n6,3\n8,4\n10,5\n")
    return path


class TestRegressionPipeline:
    """Test cases for the RegressionPipeline class."""

    def test_init_without_config(self):
        pipeline = RegressionPipeline()

        assert pipeline.strict is False
        assert pipeline.options.epochs == 100

    def test_init_with_config(self):
        config = {
            "strict": True,
            "model": {
                "epochs": 10,
                "learning_rate": 0.05,
                "normalize": True,
            },
        }

        pipeline = RegressionPipeline(config)

        assert pipeline.strict is True
        assert pipeline.options.epochs == 10
        assert pipeline.options.learning_rate == 0.05
        assert pipeline.options.normalize is True

    def test_init_with_unknown_setting(self):
        with pytest.raises(ValueError):
            RegressionPipeline({"verbose": True})

    @pytest.mark.parametrize("strict", ["false", 0, None])
    def test_init_with_non_bool_strict(self, strict):
        with pytest.raises(ValueError, match="strict must be a bool"):
            RegressionPipeline({"strict": strict})

    def test_init_with_unknown_model_option(self):
        with pytest.raises(ValueError):
            RegressionPipeline({"model": {"momentum": 0.9}})

    def test_run_reports_raw_statistics(self, source):
        pipeline = RegressionPipeline({"model": {"normalize": True}})

        report = pipeline.run(source)

        assert isinstance(report, RegressionReport)
        assert report.dataset_size == 5
        assert report.input_statistics.mean == 3.0
        assert report.output_statistics.mean == 6.0
        assert report.model.training_data.normalization is not None
        assert report.bias == report.model.bias
        assert report.weight == report.model.weight
        assert report.cost == report.model.cost

    def test_run_strict_rejects_malformed_line(self, source):
        pipeline = RegressionPipeline({"strict": True})

        with pytest.raises(MalformedRecordError):
            pipeline.run(source)

    def test_run_missing_source_is_empty_input(self, tmp_path):
        with pytest.raises(EmptyInputError):
            RegressionPipeline().run(tmp_path / "missing.csv")

    @patch("linfit.processing.pipeline.LinearRegressionModel")
    def test_run_dataset_fits_model_with_options(self, mock_model_class):
        mock_model = mock_model_class.return_value.fit.return_value
        dataset = Dataset([1.0, 2.0], [2.0, 4.0])
        pipeline = RegressionPipeline({"model": {"epochs": 3}})

        report = pipeline.run_dataset(dataset)

        mock_model_class.assert_called_once_with(dataset, pipeline.options)
        assert report.model is mock_model

    def test_run_dataset_returns_fitted_model(self):
        report = RegressionPipeline().run_dataset(Dataset([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]))

        assert isinstance(report.model, LinearRegressionModel)
        assert report.weight > 0.0
