from .orders import (
    order_type_to_wire,
    order_request_to_order_wire,
    order_wires_to_order_action,
    order_action,
    cancel_action,
    cancel_by_cloid_action,
    modify_action,
    batch_modify_action,
    schedule_cancel_action,
)
from .account import (
    update_leverage_action,
    update_isolated_margin_action,
    set_referrer_action,
    create_sub_account_action,
    sub_account_transfer_action,
    sub_account_spot_transfer_action,
    vault_transfer_action,
    use_big_blocks_action,
    agent_enable_dex_abstraction_action,
    c_signer_action,
    c_validator_unregister_action,
    c_validator_register_action,
    c_validator_change_profile_action,
)
from .transfers import (
    usd_send_action,
    spot_send_action,
    withdraw_action,
    usd_class_transfer_action,
    send_asset_action,
    token_delegate_action,
    approve_agent_action,
    approve_builder_fee_action,
    convert_to_multi_sig_user_action,
    user_dex_abstraction_action,
)
from .deploy import (
    spot_deploy_register_token_action,
    spot_deploy_user_genesis_action,
    spot_deploy_genesis_action,
    spot_deploy_register_spot_action,
    spot_deploy_register_hyperliquidity_action,
    spot_deploy_set_deployer_trading_fee_share_action,
    spot_deploy_freeze_user_action,
    spot_deploy_enable_freeze_privilege_action,
    spot_deploy_revoke_freeze_privilege_action,
    spot_deploy_enable_quote_token_action,
    perp_deploy_register_asset_action,
    perp_deploy_set_oracle_action,
)
from .multisig import multi_sig_action

__all__ = [
    "order_type_to_wire",
    "order_request_to_order_wire",
    "order_wires_to_order_action",
    "order_action",
    "cancel_action",
    "cancel_by_cloid_action",
    "modify_action",
    "batch_modify_action",
    "schedule_cancel_action",
    "update_leverage_action",
    "update_isolated_margin_action",
    "set_referrer_action",
    "create_sub_account_action",
    "sub_account_transfer_action",
    "sub_account_spot_transfer_action",
    "vault_transfer_action",
    "use_big_blocks_action",
    "agent_enable_dex_abstraction_action",
    "c_signer_action",
    "c_validator_unregister_action",
    "c_validator_register_action",
    "c_validator_change_profile_action",
    "usd_send_action",
    "spot_send_action",
    "withdraw_action",
    "usd_class_transfer_action",
    "send_asset_action",
    "token_delegate_action",
    "approve_agent_action",
    "approve_builder_fee_action",
    "convert_to_multi_sig_user_action",
    "user_dex_abstraction_action",
    "spot_deploy_register_token_action",
    "spot_deploy_user_genesis_action",
    "spot_deploy_genesis_action",
    "spot_deploy_register_spot_action",
    "spot_deploy_register_hyperliquidity_action",
    "spot_deploy_set_deployer_trading_fee_share_action",
    "spot_deploy_freeze_user_action",
    "spot_deploy_enable_freeze_privilege_action",
    "spot_deploy_revoke_freeze_privilege_action",
    "spot_deploy_enable_quote_token_action",
    "perp_deploy_register_asset_action",
    "perp_deploy_set_oracle_action",
    "multi_sig_action",
]
