from data_designer.plugins.plugin import Plugin, PluginType

text_metrics_plugin = Plugin(
    config_qualified_name="data_designer_text_metrics.config.TextMetricsColumnConfig",
    impl_qualified_name="data_designer_text_metrics.generator.TextMetricsColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
