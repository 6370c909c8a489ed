from ecomm_service.main import run

run()
