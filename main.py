import argparse
import os
from datetime import datetime

import pandas as pd

import config as cfg
import data_loader
import instances
import reports
import solve_driver
import adspend_utils.logging as logging
from adspend_utils.context import set_context


def run_pipeline(instance_dir=None, output_folder=None, settings_file=None, log_dir="logs", log_level="INFO"):
    logging.setup(log_dir=log_dir, level=log_level)
    logger = logging.getLogger(__name__)

    if settings_file:
        df_settings = pd.read_csv(settings_file)
        if not df_settings.empty:
            cfg.update_from_row(df_settings.iloc[0], cfg.SETTINGS)
            logger.info("Settings from %s applied: %s", settings_file, cfg.SETTINGS.as_dict())

    if instance_dir:
        problem = data_loader.load_problem(instance_dir)
    else:
        problem = instances.tv_campaign()
    set_context(instance_id=problem.name, size=problem.size)
    logger.info("Instance %s ready (M=%d, K=%d)", problem.name, *problem.size)

    result = solve_driver.solve(problem, cfg.SETTINGS)

    print(reports.format_report(result, cfg.SETTINGS.RoundingDigits))

    if output_folder is None:
        output_folder = f"reports_{problem.name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    try:
        reports.write_reports(output_folder, result, cfg.SETTINGS.RoundingDigits)
    except Exception:
        logging.getLogger("reports").exception("Writing reports failed")
        raise
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(description="Allocate an advertising budget and analyse the optimum.")
    parser.add_argument("--instance", help="folder with outlets.csv, slots.csv and params.csv")
    parser.add_argument("--settings", help="csv whose first row overrides solver settings")
    parser.add_argument("--output", help="report folder (default: timestamped folder)")
    parser.add_argument("--log-dir", default=os.environ.get("ADSPEND_LOG_DIR", "logs"))
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    try:
        run_pipeline(args.instance, args.output, args.settings, log_dir=args.log_dir, log_level=args.log_level)
    except Exception:
        logging.getLogger(__name__).exception("Pipeline failed")
        raise


if __name__ == '__main__':
    main()
